from typing import Callable, Optional, Union
import functools
import logging

from .config import config
from .join_types import JoinImplementation
from ..model.errors import UnknownImplementationError

logger = logging.getLogger(__name__)

class JoinFactory:
    """Resolves the configured join implementation to a join function."""

    _implementation = None
    _join_function = None
    _implementation_config = None

    @classmethod
    def initialize(cls) -> None:
        """Initialize the factory with the implementation from configuration."""
        if cls._join_function is None:
            impl_name = config.get_join_implementation()
            cls.set_implementation(impl_name)

    @classmethod
    def get_join_function(cls) -> Callable:
        """Get the join function of the current implementation."""
        if cls._join_function is None:
            cls.initialize()
        return cls._join_function

    @classmethod
    def set_implementation(cls, implementation: Union[str, JoinImplementation]) -> None:
        """Set the join implementation to use.

        Args:
            implementation: Implementation name or JoinImplementation enum value
        """
        if isinstance(implementation, JoinImplementation):
            implementation = implementation.value

        if not JoinImplementation.is_valid(implementation):
            error_msg = f"Unknown join implementation: {implementation}. Valid options: {JoinImplementation.get_all_implementations()}"
            logger.error(error_msg)
            raise UnknownImplementationError(error_msg)

        cls._implementation = implementation
        cls._implementation_config = config.get_implementation_config(implementation)

        logger.info(f"Setting join implementation to '{implementation}'")

        if implementation == JoinImplementation.HASH.value:
            from .join import hash_join
            cls._join_function = hash_join
        elif implementation == JoinImplementation.PANDAS.value:
            from .pandas_impl.join import pandas_join
            sort = bool(cls._implementation_config.get("sort", False))
            cls._join_function = functools.partial(pandas_join, sort=sort)

    @classmethod
    def get_current_implementation_name(cls) -> Optional[str]:
        """Get the name of the current join implementation, or None if not set."""
        return cls._implementation

    @classmethod
    def load_config_from_file(cls, config_file: str) -> None:
        """Load configuration from a YAML file.

        Args:
            config_file: Path to YAML configuration file
        """
        config.load_from_file(config_file)
        # Force reloading with the new config
        cls.reset()

    @classmethod
    def reset(cls) -> None:
        cls._join_function = None
        cls._implementation = None
        cls._implementation_config = None
