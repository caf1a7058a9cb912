"""
High score and game history persistence

Storage is best effort: every read falls back to a default and every write
error is swallowed, so a broken disk never interrupts a game.
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

MAX_HISTORY = 10
DEFAULT_PLAYER_NAME = "Player"


class MemoryStore:
    """Volatile store; also the fallback behaviour of ScoreStore"""

    def __init__(self, verbose: int = 0):
        self.verbose = verbose
        self._data: Dict[str, Any] = {}

    # ----------------------------
    # Raw document access
    # ----------------------------

    def _load(self) -> Dict[str, Any]:
        return self._data

    def _save(self, data: Dict[str, Any]) -> None:
        self._data = data

    def _update(self, key: str, value: Any) -> None:
        data = dict(self._load())
        data[key] = value
        self._save(data)

    # ----------------------------
    # Public API
    # ----------------------------

    def get_high_score(self) -> int:
        value = self._load().get("high_score", 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError, OverflowError):
            return 0

    def set_high_score(self, value: int) -> None:
        self._update("high_score", int(value))

    def get_player_name(self) -> str:
        name = self._load().get("player_name")
        return name if isinstance(name, str) and name else DEFAULT_PLAYER_NAME

    def set_player_name(self, name: str) -> None:
        self._update("player_name", name)

    def get_history(self) -> List[Dict[str, Any]]:
        history = self._load().get("history", [])
        return list(history) if isinstance(history, list) else []

    def record_game(self, score: int, duration_s: float, when: Optional[datetime] = None) -> None:
        """Prepend a finished game, keeping only the most recent MAX_HISTORY"""
        when = when or datetime.now(timezone.utc)
        entry = {
            "date": when.isoformat(),
            "score": int(score),
            "duration": int(duration_s),
        }
        history = [entry] + self.get_history()
        self._update("history", history[:MAX_HISTORY])

    def all_data(self) -> Dict[str, Any]:
        return {
            "player_name": self.get_player_name(),
            "high_score": self.get_high_score(),
            "history": self.get_history(),
        }


class ScoreStore(MemoryStore):
    """JSON document on disk"""

    def __init__(self, path: str, verbose: int = 0):
        super().__init__(verbose=verbose)
        self.path = path

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            if self.verbose > 0:
                print(f"[ScoreStore] Could not read {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, Any]) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            if self.verbose > 0:
                print(f"[ScoreStore] Could not write {self.path}: {e}")
