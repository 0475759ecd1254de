import pytest

from artifact_installer.modules.installfile.domain import ModelBuildingError, ProjectBuildingError
from artifact_installer.modules.installfile.service import ModelProjectBuilder


def model(group="com.acme", artifact="lib", version="1.0", packaging="jar", model_version="4.0.0") -> str:
    packaging_tag = f"<packaging>{packaging}</packaging>" if packaging is not None else ""
    return (
        f"<project><modelVersion>{model_version}</modelVersion><groupId>{group}</groupId>"
        f"<artifactId>{artifact}</artifactId><version>{version}</version>{packaging_tag}</project>"
    )


def test_build_valid_model():
    project = ModelProjectBuilder().build(model(packaging="test-jar"))

    assert (project.groupid, project.artifactid, project.version) == ("com.acme", "lib", "1.0")
    assert project.packaging == "test-jar"
    assert project.artifact.type == "test-jar"
    assert project.artifact.coordinates.extension == "jar"
    assert project.artifact.file is None
    assert project.attached_artifacts == []


def test_packaging_defaults_to_jar():
    project = ModelProjectBuilder().build(model(packaging=None))

    assert project.packaging == "jar"


def test_namespaced_pom_is_accepted():
    source = (
        '<project xmlns="http://maven.apache.org/POM/4.0.0"><modelVersion>4.0.0</modelVersion>'
        "<groupId>com.acme</groupId><artifactId>lib</artifactId><version>2.0</version>"
        "<packaging>pom</packaging></project>"
    )

    project = ModelProjectBuilder().build(source)

    assert project.is_pom
    assert project.version == "2.0"


def test_invalid_values_are_collected():
    with pytest.raises(ModelBuildingError) as info:
        ModelProjectBuilder().build(model(group="com acme", version="1.0/beta", model_version="3.0.0"))

    problems = info.value.problems
    assert len(problems) == 3
    assert "'groupId' with value 'com acme' does not match a valid id pattern." in problems
    assert "'version' with value '1.0/beta' contains invalid characters." in problems
    assert "'modelVersion' must be one of [4.0.0] but is '3.0.0'." in str(info.value)


def test_missing_fields_are_reported():
    with pytest.raises(ModelBuildingError, match="'artifactId' is missing"):
        ModelProjectBuilder().build(model(artifact=""))


def test_unparseable_model():
    with pytest.raises(ModelBuildingError, match="Non-parseable POM"):
        ModelProjectBuilder().build("<project><groupId>broken</project>")


def test_empty_model_is_not_a_model_error():
    with pytest.raises(ProjectBuildingError) as info:
        ModelProjectBuilder().build("   ")

    assert not isinstance(info.value, ModelBuildingError)
