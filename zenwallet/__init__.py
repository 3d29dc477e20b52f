"""ZenWallet personal finance tracker."""

__version__ = "1.4.0"
