"""Tests for the host-side ChessboardClient queue."""

from chesspad.board.action import ActionKind, ActionSequencer
from chesspad.board.client import ChessboardClient


def test_actions_queue_in_order(sequencer: ActionSequencer) -> None:
    client = ChessboardClient(sequencer)
    client.make_move("e4")
    client.step_back()
    client.set_end()

    assert len(client) == 3
    actions = client.take_pending()
    assert [a.kind for a in actions] == [
        ActionKind.MAKE_MOVE,
        ActionKind.STEP_BACK,
        ActionKind.SET_END,
    ]
    assert actions[0].text == "e4"
    assert len(client) == 0


def test_discriminators_come_from_client_sequencer(sequencer: ActionSequencer) -> None:
    client = ChessboardClient(sequencer)
    client.revert_move()
    client.set_start()
    first, second = client.take_pending()
    assert second.discriminator == first.discriminator + 1
    assert client.sequencer is sequencer


def test_bounded_client_drops_overflow(sequencer: ActionSequencer) -> None:
    client = ChessboardClient(sequencer, maxsize=1)
    assert client.step_forward()
    assert not client.step_back()
    assert len(client.take_pending()) == 1


def test_closed_client_drops(sequencer: ActionSequencer) -> None:
    client = ChessboardClient(sequencer)
    client.close()
    assert not client.set_position("8/8/8/8/8/8/8/8 w - - 0 1")
    assert client.take_pending() == []
