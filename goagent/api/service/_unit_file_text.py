"""systemd unit file text for a rendered UnitSpec."""

from ...templating import render_template
from .UnitSpec import UnitSpec

_UNIT_TEMPLATE = """[Unit]
Description={{ unit.description }}
After={{ unit.after | join(" ") }}

[Service]
{% for line in environment %}
Environment="{{ line }}"
{% endfor %}
ExecStart={{ script_path }}
User={{ unit.service_config.User }}
WorkingDirectory={{ unit.service_config.WorkingDirectory }}
Restart={{ unit.service_config.Restart }}
RestartSec={{ unit.service_config.RestartSec }}

[Install]
WantedBy={{ unit.wanted_by | join(" ") }}
"""


def _escape_environment_value(value: str) -> str:
    # Quoted Environment= values are C-unescaped by systemd; % starts a specifier
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("%", "%%")
    )


def _unit_file_text(unit: UnitSpec, script_path: str) -> str:
    """Render the unit file that runs ``script_path`` with the unit environment.

    PATH comes from the unit search path unless the environment sets it.
    """
    environment: dict[str, str] = {}
    if unit.path:
        environment["PATH"] = ":".join(unit.path)
    environment.update(unit.environment)

    lines = [f"{key}={_escape_environment_value(value)}" for key, value in environment.items()]
    return render_template(
        _UNIT_TEMPLATE,
        {"unit": unit, "environment": lines, "script_path": script_path},
    )
