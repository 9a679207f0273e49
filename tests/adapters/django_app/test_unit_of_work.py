"""
Testes do Unit of Work Django, dos publishers e dos handlers Celery.
"""

import logging
from unittest.mock import patch

import pytest
from django.core import mail

from src.adapters.django_app.events import handlers, publishers
from src.adapters.django_app.events.publishers import (
    CeleryEventPublisher,
    InMemoryEventPublisher,
    LoggingEventPublisher,
    get_event_publisher,
)
from src.adapters.django_app.portal.models import SubjectModel
from src.adapters.django_app.portal.repositories import DjangoSubjectRepository
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.core.portal.entities import SubjectEntity
from src.core.portal.events import ContactMessageReceivedEvent, SubjectCreatedEvent


class TestDjangoUnitOfWork:

    @pytest.mark.django_db
    def test_commit_publica_eventos(self):
        publisher = InMemoryEventPublisher()
        subject = SubjectEntity.create("Physics")

        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            DjangoSubjectRepository().save(subject)
            uow.publish_event(SubjectCreatedEvent(aggregate_id=subject.id, name=subject.name))

        assert uow.is_committed
        assert SubjectModel.objects.filter(id=subject.id).exists()
        assert [e.event_type for e in publisher.published_events] == ["SubjectCreatedEvent"]

    @pytest.mark.django_db
    def test_rollback_descarta_escrita_e_eventos(self):
        publisher = InMemoryEventPublisher()
        subject = SubjectEntity.create("Physics")

        with pytest.raises(RuntimeError):
            with DjangoUnitOfWork(event_publisher=publisher) as uow:
                DjangoSubjectRepository().save(subject)
                uow.publish_event(SubjectCreatedEvent(aggregate_id=subject.id, name=subject.name))
                raise RuntimeError("boom")

        assert uow.is_rolled_back
        assert not SubjectModel.objects.filter(id=subject.id).exists()
        assert publisher.published_events == []

    @pytest.mark.django_db
    def test_falha_do_publisher_nao_desfaz_escrita(self):
        class BrokenPublisher(InMemoryEventPublisher):
            def publish(self, event):
                raise ConnectionError("broker down")

        subject = SubjectEntity.create("Physics")

        with DjangoUnitOfWork(event_publisher=BrokenPublisher()) as uow:
            DjangoSubjectRepository().save(subject)
            uow.publish_event(SubjectCreatedEvent(aggregate_id=subject.id, name=subject.name))

        assert SubjectModel.objects.filter(id=subject.id).exists()
        assert uow.collect_events() == []


class TestPublishers:

    def test_factory(self):
        assert isinstance(get_event_publisher("sync"), LoggingEventPublisher)
        assert isinstance(get_event_publisher("celery"), CeleryEventPublisher)

        with pytest.raises(ValueError):
            get_event_publisher("kafka")

    def test_logging_publisher_apenas_loga(self):
        event = SubjectCreatedEvent(aggregate_id="s-1", name="Physics")

        with patch.object(publishers.logger, "log") as log:
            LoggingEventPublisher().publish(event)

        level, message = log.call_args.args
        assert level == logging.INFO
        assert message.startswith("[EVENT] SubjectCreatedEvent | aggregate=s-1")

    def test_celery_publisher_envia_envelope_json(self):
        event = SubjectCreatedEvent(aggregate_id="s-1", name="Physics")

        with patch.object(handlers.dispatch_domain_event, "delay") as delay:
            CeleryEventPublisher().publish(event)

        event_type, payload = delay.call_args.args
        assert event_type == "SubjectCreatedEvent"
        assert payload["data"] == {"name": "Physics"}
        assert isinstance(payload["occurred_at"], str)

    def test_celery_publisher_engole_falha_do_broker(self):
        event = SubjectCreatedEvent(aggregate_id="s-1", name="Physics")

        with patch.object(handlers.dispatch_domain_event, "delay", side_effect=ConnectionError):
            CeleryEventPublisher().publish(event)


class TestHandlers:

    def test_dispatcher_roteia_por_tipo(self):
        payload = {"event_type": "VideoAddedEvent", "data": {}}

        with patch.object(handlers.handle_content_published, "delay") as delay:
            handlers.dispatch_domain_event.run("VideoAddedEvent", payload)

        delay.assert_called_once_with(payload)

    def test_dispatcher_ignora_tipo_desconhecido(self):
        with patch.object(handlers.handle_content_published, "delay") as delay:
            handlers.dispatch_domain_event.run("UnknownEvent", {})

        delay.assert_not_called()

    def test_contato_envia_email_aos_admins(self, settings):
        settings.ADMINS = [("Staff", "staff@example.com")]
        settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
        event = ContactMessageReceivedEvent(
            aggregate_id="c-1",
            name="Ada",
            email="ada@example.com",
            message_preview="Please add more algebra notes.",
        )

        handlers.handle_contact_message_received.run(event.to_dict())

        [message] = mail.outbox
        assert message.to == ["staff@example.com"]
        assert "New contact message from Ada" in message.subject
        assert "Please add more algebra notes." in message.body
