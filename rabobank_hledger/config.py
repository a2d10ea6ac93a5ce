#!/usr/bin/env python3

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

import yaml
from beancount.core import flags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    asset_account: str = "asset:rabobank:betaalrekening"
    import_account: str = "equity:import:rabobank"
    currency: str = "EUR"
    flag: str = flags.FLAG_WARNING
    extension: str = ".journal"
    file_encoding: str = "utf-8"

    @classmethod
    def from_yaml(cls, fname) -> Config:
        with open(fname) as f:
            settings = yaml.safe_load(f) or {}

        if not isinstance(settings, dict):
            raise TypeError(f"{settings=} was not of type `dict`")

        allowed = [f.name for f in fields(cls)]
        for key, value in settings.items():
            if key not in allowed:
                raise ValueError(
                    f"You specified a setting {key} in your yaml, "
                    f"that is not in the list of allowed settings: {allowed}"
                )
            if not isinstance(value, str):
                raise TypeError(f"{key}={value!r} was not of type `str`")

        logger.debug(f"Loaded {settings=} from {fname}")
        return cls(**settings)
