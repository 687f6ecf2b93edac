from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from irishlotto.config import GAME_RULES
from irishlotto.core.engine import DrawEngine, DrawResult, PlayerTicket, ScoreOutcome
from irishlotto.core.ticket import TicketInputError, parse_ticket
from irishlotto.utils import logger


# ============================================================
# 세션 상태
# ============================================================
@dataclass(frozen=True)
class SessionState:
    """누적 손실/수익과 최근 추첨 기록 (최신순)"""
    total_losses: int = 0
    total_earnings: int = 0
    history: Tuple[DrawResult, ...] = ()

    @property
    def net(self) -> int:
        return self.total_earnings - self.total_losses


@dataclass(frozen=True)
class PlayRecord:
    """한 번의 플레이 결과"""
    ticket: PlayerTicket
    result: DrawResult
    outcome: ScoreOutcome


def apply_draw(state: SessionState, outcome: ScoreOutcome, result: DrawResult,
               stake: int = GAME_RULES['STAKE'],
               max_history: int = GAME_RULES['MAX_HISTORY']) -> SessionState:
    """추첨 결과를 반영한 새 상태 반환 (기존 상태는 변경하지 않음)"""
    history = ((result,) + state.history)[:max_history]
    return SessionState(
        total_losses=state.total_losses + stake,
        total_earnings=state.total_earnings + outcome.prize,
        history=history,
    )


def play(state: SessionState, raw_numbers: Sequence[str], raw_bonus: str,
         engine: DrawEngine) -> Tuple[SessionState, Optional[PlayRecord]]:
    """입력 해석 -> 추첨 -> 채점 -> 상태 갱신

    입력이 숫자가 아니면 아무 일도 일어나지 않는다 (같은 상태, None 반환).
    """
    try:
        ticket = parse_ticket(raw_numbers, raw_bonus)
    except TicketInputError as e:
        logger.debug(f"Play skipped, invalid field {e.field_index}: {e.raw_value!r}")
        return state, None

    result = engine.draw()
    outcome = engine.score(ticket, result)
    new_state = apply_draw(state, outcome, result)

    logger.info(
        f"Draw {list(result.main_numbers)} + {result.bonus_number}: "
        f"{outcome.match_count} matched, bonus={outcome.bonus_matched}, prize={outcome.prize}"
    )
    return new_state, PlayRecord(ticket=ticket, result=result, outcome=outcome)
