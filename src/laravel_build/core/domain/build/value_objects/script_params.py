from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScriptParams:
    """Substitution values for the build script template."""

    name: str
    php_version: str
    with_list: str
    services_list: str
    database_flag: str
    pest_flag: str
    devcontainer_flag: str

    def as_template_context(self) -> dict[str, str]:
        """Return the values keyed by the names the script template uses."""
        return {
            "Name": self.name,
            "Php": self.php_version,
            "With": self.with_list,
            "Services": self.services_list,
            "Database": self.database_flag,
            "Pest": self.pest_flag,
            "Devcontainer": self.devcontainer_flag,
        }
