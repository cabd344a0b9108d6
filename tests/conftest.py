"""Shared fixtures for codec and permission tests."""

from pathlib import Path

import pytest

from models.roles import keccak_role


@pytest.fixture
def custom_role() -> bytes:
    return keccak_role("SITE_EDITOR_ROLE")


@pytest.fixture
def write_constants(tmp_path: Path):
    """Write a constants TOML file and return its path."""

    def _write(charset_policy: str = "strict", master_chain_id: int = 11155111) -> Path:
        path = tmp_path / "constants.toml"
        path.write_text(
            "[roles]\n"
            'blacklist_label = "BLACKLIST_ROLE"\n'
            'intra_site_label = "INTRA_SITE_COMMUNICATION"\n'
            "\n[chain]\n"
            f"master_chain_id = {master_chain_id}\n"
            "\n[codec]\n"
            f'charset_policy = "{charset_policy}"\n'
        )
        return path

    return _write
