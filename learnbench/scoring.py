"""A speech contest: judges score players round by round until one remains."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

PLAYER_NAMES = "ABCDEFGHIJ"
JUDGES = 10
MIN_SCORE = 50
MAX_SCORE = 99
DEFAULT_FILENAME = "./heima/data.csv"


@dataclass
class Player:
    name: str
    score: int = 0


def trimmed_average(scores: Iterable[int]) -> int:
    """Drop the lowest and highest score and return the integer mean of the rest."""
    ordered = sorted(scores)
    if len(ordered) < 3:
        raise ValueError("need at least three scores")
    kept = ordered[1:-1]
    return sum(kept) // len(kept)


def format_players(players: Iterable[Player]) -> str:
    """Render a name/score table."""
    return "姓名     分数\n" + "".join(f"{p.name}         {p.score}\n" for p in players)


def _save_data(players: Iterable[Player]) -> str:
    return "".join(f"选手[{p.name}], 得分{p.score}\n" for p in players)


class ScoringSystem:
    """Runs contests and keeps the record of the last one in a file."""

    def __init__(self, filename: str | Path = DEFAULT_FILENAME, rng: random.Random | None = None):
        self.filename = Path(filename)
        self.rng = rng if rng is not None else random.Random()

    def init_players(self, num: int) -> list[Player]:
        """Create ``num`` players (1 to 10) named from A onwards, in shuffled order."""
        if not 0 < num <= len(PLAYER_NAMES):
            raise ValueError(f"number of players must be between 1 and {len(PLAYER_NAMES)}")
        players = [Player(name) for name in PLAYER_NAMES[:num]]
        self.rng.shuffle(players)
        return players

    def competition(self, players: Sequence[Player], session: int, out: TextIO) -> list[Player]:
        """Score one round, log it to ``out`` and return the players who advance, best first."""
        out.write(f"========第{session}轮比赛=======\n")
        for player in players:
            scores = [self.rng.randint(MIN_SCORE, MAX_SCORE) for _ in range(JUDGES)]
            out.write(f"选手[{player.name}]的评委打分 " + "".join(f"{s} " for s in scores) + "\n")
            player.score = trimmed_average(scores)
        ranked = sorted(players, key=lambda p: p.score, reverse=True)
        out.write("选手得分情况\n")
        out.write(_save_data(ranked))
        keep = len(ranked) // 2 + 1 if len(ranked) > 2 else len(ranked) // 2
        advancing = ranked[:keep]
        out.write("晋级选手名单\n")
        out.write(_save_data(advancing) + "\n")
        return advancing

    def run_competition(self, players: Sequence[Player]) -> Player:
        """Play rounds until one player is left, record them in the file and return the winner."""
        if not players:
            raise ValueError("a contest needs at least one player")
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        remaining = list(players)
        with self.filename.open("w", encoding="utf-8") as out:
            session = 1
            while len(remaining) != 1:
                remaining = self.competition(remaining, session, out)
                session += 1
        return remaining[0]

    def previous_grades(self) -> str:
        """Return the recorded contest, or an empty string if the record is empty."""
        return self.filename.read_text(encoding="utf-8")

    def clear_records(self) -> None:
        """Empty the record file, creating it if needed."""
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        self.filename.write_text("", encoding="utf-8")