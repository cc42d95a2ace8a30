from wordgrid.engine import WordSource
from wordgrid.services import GameService
from wordgrid.services.game_service import COPIED_ALERT, LOST_ALERT, WON_ALERT


def press(service, game_id, keys, notify=None):
    state = None
    for key in keys:
        state = service.apply_key(game_id, key, notify=notify)
    return state


def test_new_game_snapshot_is_empty(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    assert state.status == "PLAYING"
    assert (state.current_row, state.current_cell) == (0, 0)
    assert state.max_attempts == 6
    assert state.word_length == 5
    assert state.answer is None
    assert all(cell == {"letter": "", "status": "UNDETERMINED"} for row in state.rows for cell in row)


def test_unknown_game_returns_none(game_service):
    assert game_service.get_game_state("missing") is None
    assert game_service.apply_key("missing", "A") is None
    assert game_service.restart_game("missing") is None
    assert game_service.share_score("missing") is None
    assert game_service.delete_game("missing") is False


def test_win_notifies_and_reveals_answer(game_service):
    alerts = []
    game_id = game_service.create_new_game()
    state = press(game_service, game_id, list("CRANE") + ["ENTER"], notify=alerts.append)

    assert state.status == "WON"
    assert state.answer == "CRANE"
    assert alerts == [WON_ALERT]
    assert WON_ALERT.actions == ("Share",)

    # Input after the game ends is inert and does not re-announce
    assert press(game_service, game_id, ["A"], notify=alerts.append) == state
    assert alerts == [WON_ALERT]


def test_loss_notifies(game_service):
    alerts = []
    game_id = game_service.create_new_game()
    for word in ["TRACE", "BUILT", "SMILE", "WATER", "PLANT", "ALARM"]:
        state = press(game_service, game_id, list(word) + ["ENTER"], notify=alerts.append)

    assert state.status == "LOST"
    assert state.current_row == 6
    assert alerts == [LOST_ALERT]


def test_letter_status_keeps_best_result(game_service):
    game_id = game_service.create_new_game()
    press(game_service, game_id, list("TRACE") + ["ENTER"])
    state = press(game_service, game_id, list("ALARM") + ["ENTER"])

    assert state.letter_status["A"] == "CORRECT"
    assert state.letter_status["C"] == "PRESENT"
    assert state.letter_status["T"] == "ABSENT"
    assert state.letter_status["Z"] == "UNDETERMINED"


def test_restart_resets_everything(game_service):
    game_id = game_service.create_new_game()
    press(game_service, game_id, list("CRANE") + ["ENTER"])

    state = game_service.restart_game(game_id)

    assert state.game_id == game_id
    assert state.status == "PLAYING"
    assert (state.current_row, state.current_cell) == (0, 0)
    assert all(cell["letter"] == "" for row in state.rows for cell in row)
    assert state.answer is None


def test_share_hands_text_to_ports(game_service):
    copied, alerts = [], []
    game_id = game_service.create_new_game()
    press(game_service, game_id, list("TRACE") + ["ENTER"] + list("CRANE") + ["ENTER"])

    text = game_service.share_score(game_id, clipboard=copied.append, notify=alerts.append)

    assert text.count("\n") == 1
    assert copied == [text]
    assert alerts == [COPIED_ALERT]


def test_share_without_ports_is_pure(game_service):
    game_id = game_service.create_new_game()
    assert game_service.share_score(game_id) == ""


def test_delete_game(game_service):
    game_id = game_service.create_new_game()
    assert game_service.delete_game(game_id) is True
    assert game_service.get_game_state(game_id) is None


def test_word_length_comes_from_drawn_word():
    service = GameService(WordSource(["cat"]), max_attempts=3)
    game_id = service.create_new_game()
    state = press(service, game_id, ["C", "A", "T", "S", "ENTER"])

    assert state.word_length == 3
    assert state.max_attempts == 3
    assert state.status == "WON"


def test_duplicate_counting_setting_reaches_scoring():
    service = GameService(WordSource(["CRANE"]), count_duplicates=True)
    game_id = service.create_new_game()
    state = press(service, game_id, list("ALARM") + ["ENTER"])

    assert [cell["status"] for cell in state.rows[0]] == [
        "ABSENT", "ABSENT", "CORRECT", "PRESENT", "ABSENT"
    ]


def test_restart_after_loss_resets_everything(game_service):
    game_id = game_service.create_new_game()
    for word in ["TRACE", "BUILT", "SMILE", "WATER", "PLANT", "ALARM"]:
        press(game_service, game_id, list(word) + ["ENTER"])
    assert game_service.get_game_state(game_id).status == "LOST"

    state = game_service.restart_game(game_id)

    assert state.status == "PLAYING"
    assert (state.current_row, state.current_cell) == (0, 0)
    assert all(cell == {"letter": "", "status": "UNDETERMINED"} for row in state.rows for cell in row)
    assert set(state.letter_status.values()) == {"UNDETERMINED"}
    assert state.answer is None

    # The fresh game accepts input again
    assert press(game_service, game_id, ["C"]).current_cell == 1


def test_share_matches_snapshot_statuses():
    glyphs = {"CORRECT": "G", "PRESENT": "Y", "ABSENT": "-"}
    service = GameService(WordSource(["CRANE"]), count_duplicates=True)
    game_id = service.create_new_game()
    state = press(service, game_id, list("ALARM") + ["ENTER"])

    expected = "".join(glyphs[cell["status"]] for cell in state.rows[0])
    shared = service.share_score(game_id)

    assert expected == "--GY-"
    assert shared == "⬛⬛\U0001F7E9\U0001F7E8⬛"
