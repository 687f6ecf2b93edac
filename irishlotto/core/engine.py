import random
from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple

from irishlotto.config import GAME_RULES, PRIZE_TABLE


class RandomSource(Protocol):
    """유한 모집단에서 k개를 비복원 균등 추출하는 난수원 (random.Random 호환)"""

    def sample(self, population: Sequence[int], k: int) -> List[int]:
        ...


# ============================================================
# 데이터 모델
# ============================================================
@dataclass(frozen=True)
class PlayerTicket:
    """플레이어가 고른 번호 6개 + 보너스 번호"""
    numbers: Tuple[int, ...]
    bonus: int


@dataclass(frozen=True)
class DrawResult:
    """추첨 결과 (본번호 6개 오름차순 + 보너스 1개, 모두 서로 다름)"""
    main_numbers: Tuple[int, ...]
    bonus_number: int

    @property
    def numbers(self) -> Tuple[int, ...]:
        return self.main_numbers + (self.bonus_number,)


@dataclass(frozen=True)
class ScoreOutcome:
    match_count: int
    bonus_matched: bool
    prize: int
    matched_numbers: Tuple[int, ...] = ()

    @property
    def is_winner(self) -> bool:
        return self.prize > 0


def lookup_prize(match_count: int, bonus_matched: bool,
                 table: Mapping[Tuple[int, bool], int] = PRIZE_TABLE) -> int:
    """당첨금 조회 (표에 없는 조합은 0)"""
    return table.get((match_count, bool(bonus_matched)), 0)


# ============================================================
# 추첨 엔진
# ============================================================
class DrawEngine:
    """번호 추첨 및 채점"""

    def __init__(self, rng: Optional[RandomSource] = None,
                 pool_size: int = GAME_RULES['POOL_SIZE'],
                 main_count: int = GAME_RULES['MAIN_COUNT']):
        self.rng = rng if rng is not None else random.Random()
        self.pool = tuple(range(1, pool_size + 1))
        self.main_count = main_count

    def draw(self) -> DrawResult:
        """1~47에서 7개를 비복원 추출: 앞 6개는 정렬해 본번호, 마지막은 보너스"""
        picked = self.rng.sample(self.pool, self.main_count + 1)
        main_numbers = tuple(sorted(picked[:self.main_count]))
        return DrawResult(main_numbers=main_numbers, bonus_number=picked[self.main_count])

    def score(self, ticket: PlayerTicket, result: DrawResult) -> ScoreOutcome:
        # 집합 교집합 기준 (티켓의 중복 번호는 한 번만 센다)
        matched = set(ticket.numbers) & set(result.main_numbers)
        bonus_matched = ticket.bonus == result.bonus_number
        return ScoreOutcome(
            match_count=len(matched),
            bonus_matched=bonus_matched,
            prize=lookup_prize(len(matched), bonus_matched),
            matched_numbers=tuple(sorted(matched)),
        )
