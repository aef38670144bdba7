"""Start script run by systemd for the agent."""

from ...constants import AUTOREGISTER_LINK, SSL_CA_INFO
from ...templating import render_template

_SCRIPT_TEMPLATE = """#!/bin/bash
set -e
MPATH="${PATH}";
source /etc/profile
export PATH="${MPATH}:${PATH}";

if ! test -f ~/.nixpkgs/config.nix; then
  mkdir -p ~/.nixpkgs/
  echo "{ allowUnfree = true; }" > ~/.nixpkgs/config.nix
fi

mkdir -p {{ link_dir }}
rm -f {{ link }}
ln -s "{{ registration_file }}" {{ link }}

{{ git }} config --global --add http.sslCAinfo {{ ssl_ca_info }}
{{ command }}
"""


def _build_script(git: str, command: tuple[str, ...], registration_file: str) -> str:
    """Render the start script.

    On every start the registration symlink is replaced so it points at the
    current artifact, while ~/.nixpkgs/config.nix is only written when absent.
    """
    return render_template(
        _SCRIPT_TEMPLATE,
        {
            "link_dir": AUTOREGISTER_LINK.rsplit("/", 1)[0],
            "link": AUTOREGISTER_LINK,
            "registration_file": registration_file,
            "git": git,
            "ssl_ca_info": SSL_CA_INFO,
            "command": " ".join(command),
        },
    )
