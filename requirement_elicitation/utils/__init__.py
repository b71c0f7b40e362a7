from .logger import setup_logging
from .ids import RequirementIdFactory

__all__ = ["setup_logging", "RequirementIdFactory"]
