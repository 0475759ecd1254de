from fastapi.testclient import TestClient

from artifact_installer.factory import create_app
from artifact_installer.settings import Settings


class FailingInstaller:
    def install(self, project):
        raise OSError("read-only file system")


def build_client(tmp_path) -> TestClient:
    settings = Settings(_env_file=None, local_repository=str(tmp_path / "repo"), offline=True)
    return TestClient(create_app(settings))


def payload(source, **overrides):
    body = {"groupId": "com.acme", "artifactId": "lib", "version": "1.0", "file": str(source)}
    body.update(overrides)
    return body


def test_health(tmp_path):
    response = build_client(tmp_path).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_install_then_skip(tmp_path):
    source = tmp_path / "lib-1.0.jar"
    source.write_bytes(b"jar-bytes")
    client = build_client(tmp_path)

    first = client.post("/installfile/install-if-not-exist", json=payload(source))
    second = client.post("/installfile/install-if-not-exist", json=payload(source))

    assert first.status_code == 200
    body = first.json()
    assert body["status"] == "true"
    assert body["data"]["outcome"] == "installed"
    assert body["data"]["artifact"] == "com.acme:lib:jar:1.0"
    assert (tmp_path / "repo" / "com" / "acme" / "lib" / "1.0" / "lib-1.0.jar").read_bytes() == b"jar-bytes"
    assert second.json()["data"]["outcome"] == "skipped"
    assert second.json()["data"]["existsLocally"] is True


def test_classifier_install(tmp_path):
    source = tmp_path / "lib-sources.jar"
    source.write_bytes(b"src")
    client = build_client(tmp_path)

    response = client.post(
        "/installfile/install-if-not-exist",
        json=payload(source, packaging="jar", classifier="sources"),
    )

    assert response.status_code == 200
    assert response.json()["data"]["artifact"] == "com.acme:lib:jar:sources:1.0"
    assert (tmp_path / "repo" / "com" / "acme" / "lib" / "1.0" / "lib-1.0-sources.jar").is_file()


def test_missing_file_is_a_bad_request(tmp_path):
    response = build_client(tmp_path).post(
        "/installfile/install-if-not-exist",
        json=payload(tmp_path / "nope.jar"),
    )

    assert response.status_code == 400
    assert "does not exists" in response.json()["detail"]


def test_incomplete_coordinates_are_a_bad_request(tmp_path):
    source = tmp_path / "lib-1.0.jar"
    source.write_bytes(b"x")

    response = build_client(tmp_path).post(
        "/installfile/install-if-not-exist",
        json=payload(source, groupId=None),
    )

    assert response.status_code == 400
    assert "incomplete" in response.json()["detail"]


def test_installer_failure_is_a_server_error(tmp_path):
    source = tmp_path / "lib-1.0.jar"
    source.write_bytes(b"x")
    client = build_client(tmp_path)
    client.app.state.container.install_service.installer = FailingInstaller()

    response = client.post("/installfile/install-if-not-exist", json=payload(source))

    assert response.status_code == 500
    assert response.json()["detail"] == "read-only file system"
