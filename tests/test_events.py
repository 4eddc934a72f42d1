from unittest import TestCase

from mocking_examples import Event


class TestEvent(TestCase):
    def test_handlers_are_called_in_subscription_order(self):
        event = Event('changed')
        calls = []
        event.subscribe(lambda payload: calls.append(('first', payload)))
        event.subscribe(lambda payload: calls.append(('second', payload)))

        event.broadcast('payload')

        self.assertEqual([('first', 'payload'), ('second', 'payload')], calls)

    def test_keyword_arguments_are_passed_through(self):
        event = Event()
        calls = []
        event.subscribe(lambda sender, payload=None: calls.append(payload))

        event.broadcast(self, payload='foo')

        self.assertEqual(['foo'], calls)

    def test_subscribing_twice_registers_once(self):
        event = Event()
        calls = []

        def handler():
            calls.append(1)

        event.subscribe(handler)
        event.subscribe(handler)
        event.broadcast()

        self.assertEqual(1, len(event))
        self.assertEqual([1], calls)

    def test_unsubscribe(self):
        event = Event()
        calls = []

        def handler():
            calls.append(1)

        event.subscribe(handler)
        event.unsubscribe(handler)
        event.broadcast()

        self.assertEqual([], calls)
        self.assertNotIn(handler, event)

    def test_unsubscribing_an_unknown_handler_is_a_noop(self):
        event = Event()

        event.unsubscribe(print)

        self.assertEqual(0, len(event))

    def test_operators(self):
        event = Event()

        def handler():
            pass

        event += handler
        self.assertIn(handler, event)
        event -= handler
        self.assertNotIn(handler, event)

    def test_on_decorator_returns_the_handler(self):
        event = Event()

        @event.on
        def handler():
            pass

        self.assertIn(handler, event)
        event.off(handler)
        self.assertNotIn(handler, event)

    def test_a_failing_handler_is_logged_and_does_not_stop_the_others(self):
        event = Event('changed')
        calls = []

        def broken():
            raise RuntimeError('boom')

        event.subscribe(broken)
        event.subscribe(lambda: calls.append(1))

        with self.assertLogs('mocking_examples.events', level='ERROR') as cm:
            event.broadcast()

        self.assertEqual([1], calls)
        self.assertEqual(1, len(cm.records))
        self.assertIn("of 'changed' failed", cm.records[0].getMessage())

    def test_handlers_may_unsubscribe_while_broadcasting(self):
        event = Event()
        calls = []

        def once():
            calls.append('once')
            event.unsubscribe(once)

        event.subscribe(once)
        event.subscribe(lambda: calls.append('always'))

        event.broadcast()
        event.broadcast()

        self.assertEqual(['once', 'always', 'always'], calls)

    def test_repr(self):
        event = Event('changed')
        event.subscribe(print)

        self.assertEqual("<Event 'changed' handlers=1>", repr(event))
