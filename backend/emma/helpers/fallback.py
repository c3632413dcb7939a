from enum import Enum
from typing import NamedTuple

from emma import fallback_templates


class Intent(str, Enum):
    HOT_LEADS = "hot_leads"
    DRAFT_MESSAGE = "draft_message"
    TASKS = "tasks"
    PIPELINE = "pipeline"
    PROPERTY_MATCH = "property_match"
    DEFAULT = "default"


class FallbackRule(NamedTuple):
    intent: Intent
    keywords: tuple[str, ...]
    template: str


# Evaluated top to bottom, first match wins
FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule(Intent.HOT_LEADS, ("hot lead", "hot leads"), fallback_templates.HOT_LEADS),
    FallbackRule(
        Intent.DRAFT_MESSAGE, ("draft", "message", "follow"), fallback_templates.DRAFT_MESSAGE
    ),
    FallbackRule(Intent.TASKS, ("task", "today", "schedule"), fallback_templates.TASKS_TODAY),
    FallbackRule(
        Intent.PIPELINE, ("pipeline", "summary", "status"), fallback_templates.PIPELINE_SUMMARY
    ),
    FallbackRule(
        Intent.PROPERTY_MATCH,
        ("property", "match", "recommend"),
        fallback_templates.PROPERTY_MATCHES,
    ),
)


def _match_rule(message: str) -> FallbackRule | None:
    lower = message.lower()
    for rule in FALLBACK_RULES:
        # Plain substring test, so "multitasking" counts as "task"
        if any(keyword in lower for keyword in rule.keywords):
            return rule
    return None


def classify_intent(message: str) -> Intent:
    rule = _match_rule(message)
    return rule.intent if rule else Intent.DEFAULT


def get_smart_fallback(message: str) -> str:
    """
    Pick a canned response for the message when no live model is available.

    1. It lowercases the message and checks the keyword rules in priority order.
    2. It returns the template of the first rule with a keyword inside the message.
    3. If nothing matches, it returns the capability overview quoting the original message.
    """
    rule = _match_rule(message)
    if rule is None:
        return fallback_templates.capability_overview(message)
    return rule.template
