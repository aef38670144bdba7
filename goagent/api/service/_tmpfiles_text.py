"""tmpfiles.d fragment creating the agent home directory."""

from .AccountSpec import AccountSpec


def _tmpfiles_text(account: AccountSpec | None) -> str:
    """Return the fragment, or an empty string when no home is created."""
    if account is None or not account.create_home:
        return ""
    return f"d {account.home} 0700 {account.name} {account.group} -\n"
