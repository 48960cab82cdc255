"""
Tests for MovieBrowserController: fetch outcomes, render precedence and
the Closed/Open modal state machine.
"""

import time

import pytest
import shiboken6
from PySide6.QtCore import QObject
from PySide6.QtTest import QTest

from movieBrowser.gui import controller as controller_module
from movieBrowser.gui.controller import MovieBrowserController, MovieBrowserState, view_mode
from movieBrowser.settings import FETCH_FAILED_MESSAGE, NO_MOVIES_IN_RESPONSE


def loaded_controller(client):
    controller = MovieBrowserController(client)
    controller.load_movies(blocking=True)
    return controller


class TestFetchOutcomes:
    """One request; loading always cleared; error text per outcome."""

    def test_success_replaces_movies_in_order(self, qapp, make_client):
        payload = {"data": [{"id": 2, "title": "B"}, {"id": 1, "title": "A"}], "total": 99}
        state = loaded_controller(make_client(payload)).state
        assert [m.title for m in state.movies] == ["B", "A"]
        assert state.error is None
        assert state.loading is False

    @pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": {"id": 1}}, [], "x"])
    def test_missing_data_is_soft_error(self, qapp, make_client, payload):
        state = loaded_controller(make_client(payload)).state
        assert state.movies == []
        assert state.error == NO_MOVIES_IN_RESPONSE
        assert state.loading is False

    def test_http_failure(self, qapp, make_client, http_500):
        state = loaded_controller(make_client(error=http_500)).state
        assert state.movies == []
        assert state.error == FETCH_FAILED_MESSAGE
        assert state.loading is False

    def test_loading_set_before_and_cleared_after(self, qapp, make_client):
        controller = MovieBrowserController(make_client({"data": []}))
        seen = []
        controller.state_changed.connect(lambda s: seen.append((s.loading, s.error)))
        controller.load_movies(blocking=True)
        assert seen == [(True, None), (False, None)]

    def test_fetch_issued_once(self, qapp, make_client):
        client = make_client({"data": []})
        controller = MovieBrowserController(client)
        controller.load_movies(blocking=True)
        controller.load_movies(blocking=True)
        assert client.calls == 1

    def test_worker_thread_delivers_result(self, qapp, make_client):
        controller = MovieBrowserController(make_client({"data": [{"title": "Up"}]}))
        controller.load_movies()
        deadline = time.monotonic() + 5
        while controller.state.loading and time.monotonic() < deadline:
            QTest.qWait(10)
        assert controller.state.loading is False
        assert [m.title for m in controller.state.movies] == ["Up"]
        controller.shutdown()

    def test_results_ignored_after_shutdown(self, qapp, make_client):
        controller = MovieBrowserController(make_client())
        controller.shutdown()
        controller._on_loaded({"data": [{"title": "Late"}]})
        controller._on_finished()
        assert controller.state.movies == []

    def test_slow_fetch_outlives_destroyed_owner(self, qapp, slow_client):
        owner = QObject()
        controller = MovieBrowserController(slow_client, parent=owner)
        controller.load_movies()
        assert slow_client.started.wait(5)

        controller.shutdown()
        detached = [thr for thr, _worker in controller_module._DETACHED]
        assert len(detached) == 1
        thread = detached[0]
        assert thread.parent() is None
        assert thread.isRunning()

        shiboken6.delete(owner)          # takes the controller with it
        slow_client.release.set()
        assert thread.wait(5000)

        deadline = time.monotonic() + 5
        while controller_module._DETACHED and time.monotonic() < deadline:
            QTest.qWait(10)
        assert not controller_module._DETACHED


class TestViewMode:
    """loading → error → empty → grid."""

    def test_precedence(self):
        assert view_mode(MovieBrowserState(loading=True, error="e", movies=[object()])) == "loading"
        assert view_mode(MovieBrowserState(loading=False, error="e", movies=[object()])) == "error"
        assert view_mode(MovieBrowserState(loading=False)) == "empty"
        assert view_mode(MovieBrowserState(loading=False, movies=[object()])) == "grid"

    def test_initial_state_is_loading(self):
        assert view_mode(MovieBrowserState()) == "loading"


class TestModalTransitions:

    @pytest.fixture
    def controller(self, qapp, make_client):
        controller = loaded_controller(make_client({"data": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]}))
        controller.events = []
        controller.modal_changed.connect(controller.events.append)
        return controller

    def test_select_opens(self, controller):
        movie = controller.state.movies[0]
        controller.select_movie(movie)
        assert controller.state.modal_open is True
        assert controller.state.selected is movie
        assert controller.events == [movie]

    def test_select_same_twice_is_idempotent(self, controller):
        movie = controller.state.movies[0]
        controller.select_movie(movie)
        controller.select_movie(movie)
        assert controller.state.modal_open is True
        assert controller.state.selected is movie
        assert controller.events == [movie]

    def test_select_other_replaces(self, controller):
        a, b = controller.state.movies
        controller.select_movie(a)
        controller.select_movie(b)
        assert controller.state.selected is b
        assert controller.events == [a, b]

    def test_close_clears_selection(self, controller):
        controller.select_movie(controller.state.movies[1])
        controller.close_modal()
        assert controller.state.modal_open is False
        assert controller.state.selected is None
        assert controller.events[-1] is None

    def test_close_when_closed_is_noop(self, controller):
        controller.close_modal()
        assert controller.events == []

    def test_selection_iff_open(self, controller):
        for step in ("open", "close", "open", "open", "close", "close"):
            if step == "open":
                controller.select_movie(controller.state.movies[0])
            else:
                controller.close_modal()
            s = controller.state
            assert (s.selected is not None) == s.modal_open
