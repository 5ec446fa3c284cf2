# -*- coding: utf-8 -*-

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from seqchanges.log import logger
from seqchanges.profiling import timer


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Keep user config files out of the tests"""
    home = tmpdir.mkdir('home')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    monkeypatch.delenv('SEQCHANGES_CONFIG_DIR', raising=False)
    return home


@fixture
def reset_log_level():
    old = logger.level
    yield
    logger.setLevel(old)
    logging.getLogger().setLevel(logging.WARNING)


@fixture
def reset_timer():
    timer.reset()
    yield timer
    timer.reset()


@fixture
def json_schema_changes(request):
    schema_path = os.path.join(schema_dir, 'changes_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def changes_validator(request, json_schema_changes):
    return Validator(json_schema_changes)
