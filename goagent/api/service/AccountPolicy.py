"""Decision on who provisions the agent's OS user or group."""

from enum import Enum

from ...constants import DEFAULT_ACCOUNT_NAME


class AccountPolicy(Enum):
    """Whether goagent provisions an account or leaves it to the caller.

    Only the default name is provisioned; any other name is assumed to exist
    already and is never created, checked or reconciled.
    """

    MANAGE_ACCOUNT = "manage_account"
    EXTERNALLY_MANAGED = "externally_managed"

    @classmethod
    def for_name(cls, name: str) -> "AccountPolicy":
        if name == DEFAULT_ACCOUNT_NAME:
            return cls.MANAGE_ACCOUNT
        return cls.EXTERNALLY_MANAGED
