from pathlib import Path

from artifact_installer.modules.installfile.domain import Artifact, ArtifactCoordinates, ProjectDescriptor
from artifact_installer.modules.installfile.domain.constants import handler_extension


def test_path_segments_follow_default_layout():
    coords = ArtifactCoordinates(groupid="com.acme.tools", artifactid="lib", version="1.0")

    assert coords.path_segments == ["com/acme/tools", "lib", "1.0", "lib-1.0.jar"]
    assert str(coords) == "com.acme.tools:lib:jar:1.0"


def test_classifier_is_part_of_filename_and_coordinate_string():
    coords = ArtifactCoordinates(groupid="com.acme", artifactid="lib", version="1.0", classifier="sources")

    assert coords.filename == "lib-1.0-sources.jar"
    assert str(coords) == "com.acme:lib:jar:sources:1.0"


def test_attach_artifact_shares_base_coordinate(tmp_path):
    main = Artifact(ArtifactCoordinates("com.acme", "lib", "1.0", extension="pom"), type="pom")
    project = ProjectDescriptor(
        groupid="com.acme",
        artifactid="lib",
        version="1.0",
        packaging="pom",
        model_source="<project/>",
        artifact=main,
    )
    source = tmp_path / "lib-docs.zip"

    attached = project.attach_artifact("zip", "docs", source, "zip")

    assert project.attached_artifacts == [attached]
    assert attached.coordinates.filename == "lib-1.0-docs.zip"
    assert attached.file == Path(source)
    assert main.coordinates.classifier is None


def test_handler_extension_maps_jar_based_types():
    assert handler_extension("test-jar") == "jar"
    assert handler_extension("maven-plugin") == "jar"
    assert handler_extension("war") == "war"
