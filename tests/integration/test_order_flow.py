"""End-to-end order scenarios through the public API."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

import eventually


@dataclass(frozen=True)
class OrderCompleted:
    order_id: str


class PaymentCaptured(BaseModel):
    order_id: str
    amount: int


class OrderService:
    """Application code that publishes without holding a publisher."""

    def complete(self, order_id: str) -> None:
        eventually.publish(OrderCompleted(order_id=order_id))


class Notifier:
    def __init__(self) -> None:
        self.sent: list[str] = []

    def on_order_completed(self, event: OrderCompleted) -> None:
        self.sent.append(f"Your order {event.order_id!r} has been completed")


@pytest.mark.integration
class TestOrderFlow:
    def test_single_handler_sees_event_once(self) -> None:
        mux = eventually.PubMux()
        seen = []

        def handler(event: OrderCompleted) -> None:
            seen.append(event.order_id)

        mux.react(handler)
        mux.publish(OrderCompleted(order_id="order-123"))

        assert seen == ["order-123"]

    def test_service_publishes_through_context(self) -> None:
        mux = eventually.PubMux()
        notifier = Notifier()
        mux.react(notifier.on_order_completed)

        with eventually.use_publisher(mux):
            OrderService().complete("123")

        assert notifier.sent == ["Your order '123' has been completed"]

        mux.remove_handler(notifier.on_order_completed)
        with eventually.use_publisher(mux):
            OrderService().complete("456")

        assert len(notifier.sent) == 1

    def test_recorder_captures_service_events(self) -> None:
        rec = eventually.Recorder()

        with eventually.use_publisher(rec):
            OrderService().complete("123")
            OrderService().complete("456")

        assert rec.events == [OrderCompleted(order_id="123"), OrderCompleted(order_id="456")]

    def test_eventually_replays_history(self) -> None:
        evtl = eventually.Eventually()
        live = []
        evtl.react(lambda e: live.append(e.order_id), OrderCompleted)

        with eventually.use_publisher(evtl):
            eventually.raise_event(OrderCompleted(order_id="order-123"))
            eventually.raise_event(PaymentCaptured(order_id="order-123", amount=500))

            notifier = Notifier()
            replayed = eventually.handle_event(notifier.on_order_completed)

        assert live == ["order-123"]
        assert replayed == 1
        assert notifier.sent == ["Your order 'order-123' has been completed"]

    def test_pydantic_events_route_by_model(self) -> None:
        mux = eventually.PubMux()
        amounts = []

        def on_payment(event: PaymentCaptured) -> None:
            amounts.append(event.amount)

        mux.react(on_payment)
        mux.publish(PaymentCaptured(order_id="1", amount=100))
        mux.publish(OrderCompleted(order_id="1"))

        assert amounts == [100]

    def test_errors_share_a_base(self) -> None:
        mux = eventually.PubMux()
        with pytest.raises(eventually.EventuallyError):
            mux.publish("OrderCompleted")
        with pytest.raises(eventually.EventuallyError):
            mux.react(print)
        with pytest.raises(eventually.EventuallyError):
            eventually.publish(OrderCompleted(order_id="x"))
