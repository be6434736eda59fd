from collections import deque
from typing import Deque, Dict, List

from resume_chat.config import DEFAULT_HISTORY_LIMIT
from resume_chat.core.schemas import Exchange

DEFAULT_SESSION_ID = "default"


class ConversationStore:
    """
    Conversation history per chat session.

    Each session keeps at most `max_exchanges` user/bot exchanges; appending
    past the limit evicts the oldest one.
    """

    def __init__(self, max_exchanges: int = DEFAULT_HISTORY_LIMIT):
        if max_exchanges < 1:
            raise ValueError("max_exchanges must be at least 1")
        self.max_exchanges = max_exchanges
        self._sessions: Dict[str, Deque[Exchange]] = {}

    def append(self, session_id: str, user: str, bot: str) -> None:
        history = self._sessions.setdefault(session_id, deque(maxlen=self.max_exchanges))
        history.append(Exchange(user=user, bot=bot))

    def history(self, session_id: str = DEFAULT_SESSION_ID) -> List[Exchange]:
        return list(self._sessions.get(session_id, ()))

    def clear(self, session_id: str = DEFAULT_SESSION_ID) -> None:
        self._sessions.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
