"""Tests for the concrete messaging strategies"""

import pytest

from reflectpattern.channels import EmailService, SmsService
from reflectpattern.domain.messaging import MessageService

CHANNELS = [(SmsService, "SMS"), (EmailService, "Email")]


@pytest.mark.parametrize("channel_cls, label", CHANNELS)
class TestMessagingStrategies:
    """Behaviour shared by every built-in channel"""

    def test_is_message_service(self, channel_cls, label):
        assert issubclass(channel_cls, MessageService)
        assert isinstance(channel_cls(), MessageService)

    def test_send_prints_single_labelled_line(self, channel_cls, label, capsys):
        """send should write exactly one line with the label prefix"""
        channel_cls().send("Hello reflection!")

        out = capsys.readouterr().out
        assert out.splitlines() == [f"{label}: Hello reflection!"]

    def test_send_empty_message(self, channel_cls, label, capsys):
        channel_cls().send("")

        assert capsys.readouterr().out == f"{label}: \n"

    def test_send_returns_none(self, channel_cls, label, capsys):
        assert channel_cls().send("x") is None

    def test_send_logs_channel(self, channel_cls, label, capsys, log_messages):
        channel_cls().send("secret payload")

        assert any(f"via {label} channel" in m for m in log_messages)
        assert not any("secret payload" in m for m in log_messages)


def test_labels_are_distinct():
    """Strategies are told apart by their label"""
    assert SmsService.label != EmailService.label


def test_instances_are_independent():
    assert SmsService() is not SmsService()
