"""Detection of DevKit content already present in a file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentMarker:
    """Predicate deciding whether file content was written by the DevKit.

    Call sites only ask is_present(); the token can change without touching
    them.
    """

    token: str

    def is_present(self, content: str) -> bool:
        return self.token in content


DEVKIT_MARKER = ContentMarker(token="DevKit")
