"""
Dependency injection container for managing launcher dependencies.
"""

import logging
from typing import Any, Optional

from irongen.adapters.environment.os_environment_adapter import OsEnvironmentAdapter
from irongen.adapters.files.local_descriptor_repository import (
    LocalDescriptorRepository,
)
from irongen.adapters.selector.fzf_selector_adapter import FzfSelectorAdapter
from irongen.config.settings import Settings
from irongen.config.theme import SelectorTheme
from irongen.ports.descriptors.descriptor_repository_port import (
    DescriptorRepositoryPort,
)
from irongen.ports.environment.environment_port import EnvironmentPort
from irongen.ports.selector.selector_port import SelectorPort
from irongen.use_cases.applications.load_applications import LoadApplicationsUseCase
from irongen.use_cases.applications.resolve_directories import (
    ResolveDirectoriesUseCase,
)
from irongen.use_cases.config.init_config import InitConfigUseCase
from irongen.use_cases.selector.select_application import SelectApplicationUseCase


class DependencyContainer:
    """
    Container for managing launcher dependencies using dependency injection.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentPort] = None,
        selector: Optional[SelectorPort] = None,
    ):
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        if environment is not None:
            self._instances["environment"] = environment
        if selector is not None:
            self._instances["selector"] = selector

    def get_environment(self) -> EnvironmentPort:
        if "environment" not in self._instances:
            self._instances["environment"] = OsEnvironmentAdapter()
        return self._instances["environment"]

    def get_settings(self) -> Settings:
        """
        Get settings read from the environment.

        Raises:
            ConfigurationError: If the home directory is unknown
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings(self.get_environment())
        return self._instances["settings"]

    def get_descriptor_repository(self) -> DescriptorRepositoryPort:
        if "descriptor_repository" not in self._instances:
            self._instances["descriptor_repository"] = LocalDescriptorRepository(
                self._logger
            )
        return self._instances["descriptor_repository"]

    def get_selector(self) -> SelectorPort:
        if "selector" not in self._instances:
            self._instances["selector"] = FzfSelectorAdapter(
                self.get_settings().selector_command, self._logger
            )
        return self._instances["selector"]

    def get_theme(self) -> SelectorTheme:
        if "theme" not in self._instances:
            self._instances["theme"] = SelectorTheme.load(
                self.get_settings().config_file, self._logger
            )
        return self._instances["theme"]

    def get_resolve_directories_use_case(self) -> ResolveDirectoriesUseCase:
        if "resolve_directories_use_case" not in self._instances:
            self._instances["resolve_directories_use_case"] = (
                ResolveDirectoriesUseCase(self.get_settings(), self._logger)
            )
        return self._instances["resolve_directories_use_case"]

    def get_load_applications_use_case(self) -> LoadApplicationsUseCase:
        if "load_applications_use_case" not in self._instances:
            self._instances["load_applications_use_case"] = LoadApplicationsUseCase(
                self.get_descriptor_repository(), self._logger
            )
        return self._instances["load_applications_use_case"]

    def get_select_application_use_case(self) -> SelectApplicationUseCase:
        """
        Get the selection use case with selector, theme and quoting policy.

        Returns:
            Configured SelectApplicationUseCase
        """
        if "select_application_use_case" not in self._instances:
            self._instances["select_application_use_case"] = SelectApplicationUseCase(
                self.get_selector(),
                self.get_theme(),
                self._logger,
                quote_output=self.get_settings().quote_output,
            )
        return self._instances["select_application_use_case"]

    def get_init_config_use_case(self) -> InitConfigUseCase:
        if "init_config_use_case" not in self._instances:
            self._instances["init_config_use_case"] = InitConfigUseCase(
                self.get_settings(), self._logger
            )
        return self._instances["init_config_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
