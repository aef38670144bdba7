"""sysusers.d fragment for the provisioned agent user and group."""

from ...constants import DEFAULT_SHELL
from .AccountSpec import AccountSpec
from .GroupSpec import GroupSpec


def _sysusers_text(account: AccountSpec | None, group: GroupSpec | None) -> str:
    """Return the fragment, or an empty string when nothing is provisioned."""
    lines: list[str] = []
    if group is not None:
        lines.append(f"g {group.name} -")
    if account is not None:
        # "-" lets sysusers create a same-named primary group or reuse ours
        ident = "-" if account.group == account.name else f"-:{account.group}"
        shell = DEFAULT_SHELL if account.use_default_shell else "-"
        lines.append(f'u {account.name} {ident} "{account.description}" {account.home} {shell}')
        for extra in account.extra_groups:
            lines.append(f"m {account.name} {extra}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
