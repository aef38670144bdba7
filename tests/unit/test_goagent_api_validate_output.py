"""Unit tests for goagent.api.validate_output."""

import pytest

from goagent.api.config.cmd_version import cmd_version
from goagent.api.service.cmd_stop import cmd_stop
from goagent.api.validate_output import validate_output


def test_valid_output_passes():
    output = {"errors": [], "warnings": [], "version": "1.0"}
    assert validate_output(cmd_version, output) == output


def test_missing_field_fails():
    with pytest.raises(ValueError, match="Output validation failed for service.stop"):
        validate_output(cmd_stop, {"errors": [], "warnings": [], "message": "done"})


def test_non_api_function_skipped():
    def cmd_local():
        pass

    assert validate_output(cmd_local, {"anything": True}) == {"anything": True}
