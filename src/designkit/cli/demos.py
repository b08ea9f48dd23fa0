"""One small entry point per pattern. Each returns plain data for the CLI to print."""
import threading
from typing import Any, Dict, List, Optional

from designkit.application.bus import CommandBus
from designkit.application.commands import SendWelcomeNotificationCommand
from designkit.application.handlers import SendWelcomeNotificationHandler
from designkit.domain.events import CallbackObserver, EventHub
from designkit.domain.exceptions import NotificationError
from designkit.domain.pricing import FixedRateTaxStrategy, PriceCalculator
from designkit.infrastructure.adapters import LegacyDataSource, LegacyReportAdapter
from designkit.infrastructure.factories import TransportFactory
from designkit.infrastructure.notifiers import EmailNotifier, build_notifier_chain
from designkit.infrastructure.patterns import AppLogger, get_singleton


def singleton_demo(threads: int = 8) -> Dict[str, Any]:
    """Race several threads for the shared AppLogger."""
    seen: List[int] = []
    lock = threading.Lock()

    def worker(index: int) -> None:
        app_logger = get_singleton(AppLogger)
        app_logger.log(f"hello from thread {index}")
        with lock:
            seen.append(id(app_logger))

    workers = [threading.Thread(target=worker, args=(i,)) for i in range(threads)]
    for worker_thread in workers:
        worker_thread.start()
    for worker_thread in workers:
        worker_thread.join()

    return {
        "threads": threads,
        "distinct_instances": len(set(seen)),
        "entries": len(get_singleton(AppLogger).entries),
    }


def factory_demo(kind: str, destination: str) -> Dict[str, Any]:
    transport = TransportFactory().create(kind)
    return {"kind": transport.kind, "plan": transport.deliver(destination)}


def adapter_demo(payload: str = "Données dans ancien format") -> Dict[str, Any]:
    adapter = LegacyReportAdapter(LegacyDataSource(payload))
    return {"data": adapter.get_data()}


def decorator_demo(channels: List[str], message: str) -> Dict[str, Any]:
    notifier = build_notifier_chain(channels, base=EmailNotifier())
    return {"channels": ["email", *channels], "deliveries": notifier.send(message)}


def strategy_demo(price: float, rate: float, swap_rate: Optional[float] = None) -> Dict[str, Any]:
    calculator = PriceCalculator(FixedRateTaxStrategy(rate))
    result: Dict[str, Any] = {"price": price, "rate": rate, "total": calculator.total(price)}
    if swap_rate is not None:
        calculator.set_strategy(FixedRateTaxStrategy(swap_rate))
        result["swapped_rate"] = swap_rate
        result["swapped_total"] = calculator.total(price)
    return result


def observer_demo(event: str, observers: List[str], failure_policy: str = "continue") -> Dict[str, Any]:
    hub = EventHub(failure_policy=failure_policy)
    calls: List[str] = []
    for name in observers:
        hub.attach(CallbackObserver(lambda received, name=name: calls.append(f"{name}.update({received!r})")))
    try:
        hub.notify(event)
    except NotificationError as e:
        return {"calls": calls, "failures": len(e.failures)}
    return {"calls": calls, "failures": 0}


def command_demo(email: str, name: str) -> Dict[str, Any]:
    bus = CommandBus()
    bus.register_handler(SendWelcomeNotificationCommand, SendWelcomeNotificationHandler(EmailNotifier()))
    result = bus.dispatch(SendWelcomeNotificationCommand(email=email, name=name))
    return result.to_dict()
