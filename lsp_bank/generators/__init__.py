"""Random data generators."""

from lsp_bank.generators.account import AccountGenerator, split_by_capability
from lsp_bank.generators.base import BaseGenerator

__all__ = ["AccountGenerator", "BaseGenerator", "split_by_capability"]
