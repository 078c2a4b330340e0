"""Textual integration for propwire. Opt-in — requires textual.

Bridges ``property_changed`` and command availability to widgets. The
guard (app running and not paused), NoMatches handling and cross-thread
marshalling live here so that view code only supplies the effect.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from propwire._properties import require_property

logger = logging.getLogger("propwire.textual")

# Module-owned pause state, keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend bindings during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def _guard(app, fn):
    """Wrap fn: skip when unsafe, marshal to the binding thread, ignore NoMatches."""
    _main = threading.get_ident()

    def _safe(*args):
        try:
            fn(*args)
        except NoMatches:
            logger.debug("Binding target not mounted; skipped %r", fn)

    def _guarded(*args):
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, *args)
        else:
            _safe(*args)

    return _guarded


def bind(app, obj, name, effect):
    """Call effect(obj.<name>) whenever name is notified on obj.

    Fires for direct writes and for dependency fan-out alike. Returns a
    disposer that detaches the binding.

    Usage:
        bind(app, match, "blue_name", lambda v: app.query_one("#blue").update(v))
    """
    require_property(type(obj), name)
    apply = _guard(app, lambda: effect(getattr(obj, name)))
    notified = obj.property_changed.filter(lambda changed: changed == name)
    notified.subscribe(lambda _: apply())
    return notified.dispose


def bind_command(app, command, widget):
    """Keep widget.disabled in step with command.can_execute().

    The widget state is synced immediately, then on every can_execute_changed.
    Returns the unsubscribe function.
    """

    def _sync(cmd):
        widget.disabled = not cmd.can_execute()

    _sync(command)
    return command.can_execute_changed.subscribe(_guard(app, _sync))
