"""
Fixed reference content: the workaholism symptom questionnaire and the
ten Smart Laziness principles a decision can be attributed to.

Order matters. Symptom ids are the keys of an assessment answer map.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Symptom:
    id: int
    title: str
    description: str
    examples: tuple[str, ...]


@dataclass(frozen=True)
class Principle:
    id: int
    name: str
    description: str


SYMPTOMS: tuple[Symptom, ...] = (
    Symptom(
        1,
        "You Compete in Suffering",
        "Talks about sleeping little, skipping lunch and working weekends as a badge of honour.",
        ("I slept 3 hours last night", "Didn't have lunch today, too busy",
         "I haven't had a weekend off in 6 months"),
    ),
    Symptom(
        2,
        "You Confuse Presence with Value",
        "Measures worth by the amount of hours visible to others.",
        ("John is always online on Slack", "Mary never leaves before 7pm",
         "Peter answers email in the middle of the night"),
    ),
    Symptom(
        3,
        "You Are Proud of Having No Life",
        "Brags about never taking vacations and always working.",
        ("I haven't taken a vacation in 2 years", "I work even on weekends",
         "My family is used to me not being around"),
    ),
    Symptom(
        4,
        "You Use 'No Time' as a Universal Excuse",
        "Avoids thinking deeply by using lack of time as the justification.",
        ("I have no time to think about that", "I have no time to automate",
         "I have no time to question whether this makes sense"),
    ),
    Symptom(
        5,
        "You Measure Success by Input, Not Output",
        "Focuses on activities performed instead of results produced.",
        ("I sent 150 emails today", "I attended 8 meetings", "I worked 12 hours"),
    ),
    Symptom(
        6,
        "You Avoid Automation",
        "Prefers doing repetitive tasks by hand.",
        ("It's faster to do it by hand", "Not worth automating something so simple",
         "I already know how to do it, why complicate?"),
    ),
    Symptom(
        7,
        "You Are Addicted to Urgency",
        "Everything is urgent and top priority; lives in reaction mode.",
        ("Everything is due yesterday", "Always in firefighting mode",
         "Can't plan because everything is urgent"),
    ),
    Symptom(
        8,
        "You Romanticise Sacrifice",
        "Believes suffering is required for success.",
        ("Entrepreneurship demands sacrifice", "Success has a price",
         "Nothing of value comes easy"),
    ),
    Symptom(
        9,
        "You Are Allergic to Simplification",
        "Complexity has become a symbol of intellectual status.",
        ("It can't be that simple", "If it were easy everybody would do it",
         "There must be a catch"),
    ),
    Symptom(
        10,
        "You Compete for Recognition of Effort",
        "Needs others to see the effort in order to feel valued.",
        ("Nobody sees how much I work", "They don't recognise my dedication",
         "I do everything here and nobody cares"),
    ),
)

SYMPTOM_IDS: tuple[int, ...] = tuple(s.id for s in SYMPTOMS)


PRINCIPLES: tuple[Principle, ...] = (
    Principle(1, 'Ask "Why?" Before "How?"',
              "80% of tasks disappear once you question whether they are needed."),
    Principle(2, "Leverage Fanaticism",
              "If it takes 5+ minutes and it recurs, automate it."),
    Principle(3, '"No" as the Default Answer',
              "Everything is a no until it proves it deserves a yes."),
    Principle(4, "Build Systems, Not Dependencies",
              "If only you know how to do it, you have failed."),
    Principle(5, "Obsession with Multiplication",
              "How could this get done without you doing it?"),
    Principle(6, "Output Over Input",
              "Judge the work by results produced, never by hours spent."),
    Principle(7, "Simplicity as Status",
              "The simplest solution that works is the smartest one."),
    Principle(8, "Protect Deep Focus",
              "Guard long uninterrupted blocks; batch the shallow work."),
    Principle(9, "Plan to Prevent Urgency",
              "Most emergencies are planning failures that arrived late."),
    Principle(10, "Rest Is Part of the Work",
              "A rested brain finds the lazy, effective path."),
)

PRINCIPLE_NAMES: frozenset[str] = frozenset(p.name for p in PRINCIPLES)
