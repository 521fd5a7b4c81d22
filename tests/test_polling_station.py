import pytest

from engage_app.core.errors import InvalidStateTransition, ValidationError
from engage_app.core.models import PollType, PollView
from engage_app.core.services.polling_station import PollingStation


@pytest.fixture
def station():
    return PollingStation()


def test_host_view_starts_in_create(station):
    assert station.get_host_view() is PollView.CREATE
    assert station.get_poll_view() is PollView.VOTE


def test_start_poll_filters_blank_options(station):
    poll = station.start_poll("Lunch?", PollType.MULTIPLE_CHOICE, ["Pizza", "  ", "", " Sushi "])
    assert [option.text for option in poll.options] == ["Pizza", "Sushi"]
    assert all(option.votes == 0 for option in poll.options)
    assert station.get_host_view() is PollView.VOTE


def test_start_poll_with_empty_question_changes_nothing(station):
    with pytest.raises(ValidationError):
        station.start_poll("   ", PollType.MULTIPLE_CHOICE, ["A", "B"])
    assert station.get_active_poll() is None


def test_multiple_choice_poll_needs_an_option(station):
    with pytest.raises(ValidationError):
        station.start_poll("Anything?", PollType.MULTIPLE_CHOICE, ["", " "])
    assert station.get_active_poll() is None


def test_open_text_poll_ignores_options(station):
    poll = station.start_poll("Thoughts?", PollType.OPEN_TEXT, ["ignored"])
    assert poll.options == []


def test_vote_increments_only_chosen_option(station):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B", "C"])
    station.submit_vote(option_index=1)
    poll = station.get_active_poll()
    assert [option.votes for option in poll.options] == [0, 1, 0]


def test_total_votes_equals_number_of_calls(station):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B", "C"])
    choices = [0, 2, 2, 1, 0, 2, 2]
    for choice in choices:
        station.submit_vote(option_index=choice)
    assert station.get_total_votes() == len(choices)
    assert [option.votes for option in station.get_active_poll().options] == [2, 1, 4]


def test_repeat_voting_is_counted(station):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B"])
    for _ in range(3):
        station.submit_vote(option_index=0)
    assert station.get_active_poll().options[0].votes == 3


def test_vote_percentages(station):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B"])
    assert station.get_vote_percentages() == [0.0, 0.0]
    for choice in (0, 0, 0, 1):
        station.submit_vote(option_index=choice)
    assert station.get_vote_percentages() == [75.0, 25.0]


@pytest.mark.parametrize("index", [None, -1, 2])
def test_vote_with_invalid_index(station, index):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B"])
    with pytest.raises(ValidationError):
        station.submit_vote(option_index=index)
    assert station.get_total_votes() == 0


def test_open_text_answers_are_trimmed(station):
    station.start_poll("Thoughts?", PollType.OPEN_TEXT)
    station.submit_vote(text="  more coffee  ")
    with pytest.raises(ValidationError):
        station.submit_vote(text="   ")
    assert station.get_active_poll().open_text_answers == ["more coffee"]


def test_vote_without_active_poll_is_ignored(station):
    assert station.submit_vote(option_index=0) is None
    assert station.submit_vote(text="hello") is None


def test_results_view_round_trip_and_close(station):
    station.start_poll("Pick", PollType.MULTIPLE_CHOICE, ["A", "B"])
    station.show_results()
    assert station.get_poll_view() is PollView.RESULTS
    station.show_vote()
    assert station.get_poll_view() is PollView.VOTE
    station.show_results()
    station.close_poll()
    assert station.get_active_poll() is None
    assert station.get_poll_view() is PollView.VOTE
    assert station.get_host_view() is PollView.CREATE


def test_show_results_requires_a_poll(station):
    with pytest.raises(InvalidStateTransition):
        station.show_results()


def test_new_poll_replaces_active_poll(station):
    station.start_poll("First", PollType.MULTIPLE_CHOICE, ["A", "B"])
    station.submit_vote(option_index=0)
    station.show_results()
    poll = station.start_poll("Second", PollType.OPEN_TEXT)
    assert station.get_active_poll() is poll
    assert station.get_poll_view() is PollView.VOTE
