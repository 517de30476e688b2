"""
Tests for feedback messages and the copy label.
"""

from nametree.core import FeedbackKind
from nametree.feedback import CopyLabel, FeedbackCenter


class TestFeedbackCenter:
    def test_messages_expire_independently(self, clock, scheduler):
        center = FeedbackCenter(scheduler, duration=3.0)
        center.show(FeedbackKind.SUCCESS, "first")
        clock.advance(1.0)
        center("error", "second")

        assert [m.message for m in center.messages] == ["first", "second"]
        assert center.messages[1].kind is FeedbackKind.ERROR

        clock.advance(2.0)
        scheduler.run_due()
        assert [m.message for m in center.messages] == ["second"]

        clock.advance(1.0)
        scheduler.run_due()
        assert center.messages == ()

    def test_ids_are_unique(self, scheduler):
        center = FeedbackCenter(scheduler)
        first = center.show("info", "same")
        second = center.show("info", "same")
        assert first.id != second.id

    def test_remove(self, scheduler):
        center = FeedbackCenter(scheduler)
        entry = center.show("warning", "x")

        assert center.remove(entry.id) is True
        assert center.remove(entry.id) is False
        assert center.messages == ()
        assert scheduler.pending == []

    def test_clear(self, scheduler):
        center = FeedbackCenter(scheduler)
        center.show("info", "a")
        center.show("info", "b")

        center.clear()

        assert center.messages == ()
        assert scheduler.pending == []


class TestCopyLabel:
    def test_reverts_after_delay(self, clock, scheduler):
        label = CopyLabel(scheduler, duration=2.0)
        assert label.text == "Copy"

        label.mark_copied()
        assert label.text == "Copied!"

        clock.advance(2.0)
        scheduler.run_due()
        assert label.text == "Copy"

    def test_repeated_copy_restarts_timer(self, clock, scheduler):
        label = CopyLabel(scheduler, duration=2.0, idle_text="コピー", copied_text="コピー済み")
        label.mark_copied()
        clock.advance(1.0)
        label.mark_copied()

        clock.advance(1.0)
        scheduler.run_due()
        assert label.text == "コピー済み"

        clock.advance(1.0)
        scheduler.run_due()
        assert label.text == "コピー"

    def test_reset_cancels_timer(self, scheduler):
        label = CopyLabel(scheduler)
        label.mark_copied()
        label.reset()
        assert label.text == "Copy"
        assert scheduler.pending == []
