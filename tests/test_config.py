#!/usr/bin/env python3

from textwrap import dedent

import pytest

from rabobank_hledger.config import Config


def test_defaults():
    config = Config()
    assert config.asset_account == "asset:rabobank:betaalrekening"
    assert config.import_account == "equity:import:rabobank"
    assert config.currency == "EUR"
    assert config.flag == "!"
    assert config.extension == ".journal"


def test_from_yaml(tmp_path):
    fname = tmp_path / "config.yaml"
    fname.write_text(
        dedent(
            """
            asset_account: assets:rabobank:checking
            currency: EUR
            """
        )
    )
    config = Config.from_yaml(fname)
    assert config.asset_account == "assets:rabobank:checking"
    assert config.import_account == "equity:import:rabobank"


def test_from_empty_yaml(tmp_path):
    fname = tmp_path / "config.yaml"
    fname.write_text("")
    assert Config.from_yaml(fname) == Config()


@pytest.mark.parametrize(
    "file_content, exception",
    [
        ("- asset_account", TypeError),
        ("asset_acount: assets:bank", ValueError),
        ("currency: 12", TypeError),
    ],
)
def test_from_yaml_rejects(tmp_path, file_content, exception):
    fname = tmp_path / "config.yaml"
    fname.write_text(file_content)
    with pytest.raises(exception):
        Config.from_yaml(fname)
