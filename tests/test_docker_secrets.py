"""Tests for secret lookup."""

from __future__ import annotations

from pathlib import Path

from casdoor_entrypoint.docker_secrets import DockerSecretStore, SecretStore, StaticSecretStore, resolve_secret


def test_docker_store_reads_secret_file(tmp_path: Path) -> None:
    (tmp_path / "casdoor_db_user").write_text("admin\n")

    store = DockerSecretStore(tmp_path)

    assert store.read("casdoor_db_user") == "admin"
    assert store.read("casdoor_db_password") is None


def test_docker_store_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "casdoor_db_user").mkdir()

    assert DockerSecretStore(tmp_path).read("casdoor_db_user") is None


def test_empty_secret_file_counts_as_present(tmp_path: Path) -> None:
    (tmp_path / "casdoor_db_password").write_text("")

    assert resolve_secret(DockerSecretStore(tmp_path), "casdoor_db_password", "fallback") == ""


def test_resolve_secret_falls_back_when_absent() -> None:
    store = StaticSecretStore({"present": "value"})

    assert resolve_secret(store, "present", "fallback") == "value"
    assert resolve_secret(store, "absent", "fallback") == "fallback"


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(DockerSecretStore(tmp_path), SecretStore)
    assert isinstance(StaticSecretStore(), SecretStore)


def test_docker_store_keeps_undecodable_bytes(tmp_path: Path) -> None:
    (tmp_path / "casdoor_db_password").write_bytes(b"caf\xe9\n")

    value = DockerSecretStore(tmp_path).read("casdoor_db_password")

    assert value is not None
    assert value.encode("utf-8", errors="surrogateescape") == b"caf\xe9"
