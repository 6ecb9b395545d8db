from procscript.utils import dispatch, logging, text

__all__ = ("dispatch", "logging", "text")
