from icsim.core.base.message import Message, Result
from icsim.core.base.terminal import Terminal, handles

__all__ = ["Message", "Result", "Terminal", "handles"]
