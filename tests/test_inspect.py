"""Tests for machine inspection and status queries."""

from __future__ import annotations

import json

import pytest

from dinghy.errors import InspectionError
from dinghy.machine import (
    MachineInspection,
    inspect_machine,
    machine_created,
    machine_running,
    machine_status,
    parse_inspection,
)
from dinghy.util import CmdResult


def test_store_path_older_driver_layout() -> None:
    insp = MachineInspection({'Driver': {'StorePath': '/a', 'MachineName': 'dinghy'}})
    assert insp.store_path == '/a/machines/dinghy'


def test_store_path_newer_top_level_layout() -> None:
    insp = MachineInspection({'StorePath': '/b', 'Driver': {}})
    assert insp.store_path == '/b'


def test_driver_store_path_wins_over_top_level() -> None:
    insp = MachineInspection(
        {
            'StorePath': '/b',
            'Driver': {'StorePath': '/a', 'MachineName': 'dinghy'},
        }
    )
    assert insp.store_path == '/a/machines/dinghy'


def test_missing_fields_are_none() -> None:
    insp = MachineInspection({})
    assert insp.ip_address is None
    assert insp.driver_name is None
    assert insp.store_path is None
    with pytest.raises(InspectionError):
        insp.require_ip_address()
    with pytest.raises(InspectionError):
        insp.require_store_path()


def test_parse_inspection_rejects_bad_output() -> None:
    with pytest.raises(InspectionError):
        parse_inspection('')
    with pytest.raises(InspectionError):
        parse_inspection('Host does not exist: "dinghy"')
    with pytest.raises(InspectionError):
        parse_inspection('[1, 2]')


def test_inspect_machine(monkeypatch) -> None:
    doc = {
        'DriverName': 'virtualbox',
        'Driver': {
            'IPAddress': '192.168.99.100',
            'StorePath': '/home/u/.docker/machine',
            'MachineName': 'dinghy',
        },
    }
    calls = []

    def fake_run_cmd(cmd, **kwargs):
        calls.append(cmd)
        return CmdResult(0, json.dumps(doc), '')

    monkeypatch.setattr('dinghy.machine.inspect.run_cmd', fake_run_cmd)
    insp = inspect_machine()
    assert calls == [['docker-machine', 'inspect', 'dinghy']]
    assert insp.driver_name == 'virtualbox'
    assert insp.ip_address == '192.168.99.100'
    assert insp.store_path == '/home/u/.docker/machine/machines/dinghy'


def test_inspect_machine_absent(monkeypatch) -> None:
    monkeypatch.setattr(
        'dinghy.machine.inspect.run_cmd',
        lambda *a, **k: CmdResult(1, '', 'Host does not exist: "dinghy"'),
    )
    with pytest.raises(InspectionError, match='Host does not exist'):
        inspect_machine()


def test_not_created_ignores_stdout(monkeypatch) -> None:
    monkeypatch.setattr(
        'dinghy.machine.inspect.run_cmd',
        lambda *a, **k: CmdResult(1, 'Running\n', 'error'),
    )
    assert machine_created() is False
    assert machine_status() == 'not created'
    assert machine_running() is False


def test_status_lowercases_output(monkeypatch) -> None:
    calls = []

    def fake_run_cmd(cmd, **kwargs):
        calls.append(cmd)
        return CmdResult(0, 'Running\n', '')

    monkeypatch.setattr('dinghy.machine.inspect.run_cmd', fake_run_cmd)
    assert machine_created() is True
    assert machine_status() == 'running'
    assert machine_running() is True
    assert all(c == ['docker-machine', 'status', 'dinghy'] for c in calls)
