import re
from typing import Sequence

from irishlotto.config import GAME_RULES
from irishlotto.core.engine import PlayerTicket


# ASCII 정수만 허용 (밑줄, 전각/유니코드 숫자 거부)
_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class TicketInputError(ValueError):
    """입력 필드를 정수로 해석할 수 없음 (0~5: 본번호, 6: 보너스)"""

    def __init__(self, field_index: int, raw_value):
        self.field_index = field_index
        self.raw_value = raw_value
        super().__init__(f"Field {field_index} is not a number: {raw_value!r}")


def _parse_field(index: int, raw_value) -> int:
    text = '' if raw_value is None else str(raw_value).strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise TicketInputError(index, raw_value)
    return int(text, 10)


def parse_ticket(raw_numbers: Sequence[str], raw_bonus: str) -> PlayerTicket:
    """폼 입력값을 티켓으로 변환

    범위/중복 검사는 하지 않는다. 숫자가 아닌 값만 거부한다.
    """
    main_count = GAME_RULES['MAIN_COUNT']
    if len(raw_numbers) != main_count:
        raise ValueError(f"Expected {main_count} numbers, got {len(raw_numbers)}")

    numbers = tuple(_parse_field(i, raw) for i, raw in enumerate(raw_numbers))
    bonus = _parse_field(main_count, raw_bonus)
    return PlayerTicket(numbers=numbers, bonus=bonus)
