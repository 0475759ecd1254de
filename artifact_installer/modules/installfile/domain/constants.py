"""Constants shared across installfile domain models."""

POM_PACKAGING = "pom"
MODEL_VERSION = "4.0.0"
METADATA_FILENAME = "maven-metadata-local.xml"
SNAPSHOT_SUFFIX = "-SNAPSHOT"

# Packaging types whose files do not use the packaging name as extension.
ARTIFACT_HANDLER_EXTENSIONS = {
    "test-jar": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
    "bundle": "jar",
}


def handler_extension(packaging: str) -> str:
    """Return the file extension registered for a packaging type."""
    return ARTIFACT_HANDLER_EXTENSIONS.get(packaging, packaging)
