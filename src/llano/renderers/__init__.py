"""Llano renderers.

Renderers convert a document event sequence into an output format.

Available Renderers:
- PlainTextRenderer: Renders events to plain text with all markup removed

Thread Safety:
All renderers keep their working state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from llano.renderers.plain import PlainTextRenderer, render_plain
from llano.renderers.protocol import EventRenderer

__all__ = ["EventRenderer", "PlainTextRenderer", "render_plain"]
