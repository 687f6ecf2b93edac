import pytest

from irishlotto.core.engine import DrawEngine, PlayerTicket
from irishlotto.core.session import SessionState, play
from irishlotto.core.ticket import TicketInputError, parse_ticket


def test_parse_ticket_converts_fields():
    ticket = parse_ticket(["1", "2", "3", "4", "5", "6"], "7")
    assert ticket == PlayerTicket(numbers=(1, 2, 3, 4, 5, 6), bonus=7)


def test_parse_ticket_keeps_order_and_strips_whitespace():
    ticket = parse_ticket([" 40", "3 ", "17", "9", "33", "1"], " 25 ")
    assert ticket.numbers == (40, 3, 17, 9, 33, 1)
    assert ticket.bonus == 25


def test_parse_ticket_does_not_check_range_or_duplicates():
    ticket = parse_ticket(["1", "1", "1", "1", "1", "99"], "0")
    assert ticket.numbers == (1, 1, 1, 1, 1, 99)
    assert ticket.bonus == 0


@pytest.mark.parametrize("raw, index", [
    (["", "2", "3", "4", "5", "6"], 0),
    (["1", "2", "x", "4", "5", "6"], 2),
    (["1", "2", "3", "4", "5", "1.5"], 5),
    (["1", "2", "3", "4", "5", "   "], 5),
    (["1", "2", "3", "4", "5", "1_0"], 5),
    (["1", "2", "3", "4", "5", "４"], 5),
    (["1", "2", "3", "4", "5", "٣"], 5),
    (["1", "2", "3", "0x1", "5", "6"], 3),
])
def test_parse_ticket_rejects_non_numeric_main_fields(raw, index):
    with pytest.raises(TicketInputError) as exc_info:
        parse_ticket(raw, "7")
    assert exc_info.value.field_index == index


@pytest.mark.parametrize("bonus", ["", "abc", None, "٣", "1_0"])
def test_parse_ticket_rejects_non_numeric_bonus(bonus):
    with pytest.raises(TicketInputError) as exc_info:
        parse_ticket(["1", "2", "3", "4", "5", "6"], bonus)
    assert exc_info.value.field_index == 6


def test_parse_ticket_requires_six_fields():
    with pytest.raises(ValueError):
        parse_ticket(["1", "2", "3"], "7")


def test_parse_ticket_accepts_signed_ascii_integers():
    ticket = parse_ticket(["+1", "-2", "03", "4", "5", "6"], "+7")
    assert ticket.numbers == (1, -2, 3, 4, 5, 6)
    assert ticket.bonus == 7


def test_unicode_digits_are_silently_skipped(scripted):
    source = scripted([1, 2, 3, 4, 5, 6, 7])
    state, record = play(SessionState(), ["1", "2", "3", "4", "5", "６"], "7",
                         DrawEngine(rng=source))

    assert record is None
    assert state == SessionState()
    assert source.calls == []
