#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn document events into output markup."""

from md2jira.renderers.base import BaseRenderer
from md2jira.renderers.jira import JiraRenderer, JiraRenderState, events_to_jira
from md2jira.renderers.writer import DeferredNewlineWriter

__all__ = [
    "BaseRenderer",
    "DeferredNewlineWriter",
    "JiraRenderState",
    "JiraRenderer",
    "events_to_jira",
]
