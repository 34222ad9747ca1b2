"""
Ordered guard chain that decides what happens to each scanned character.

Each guard is a (name, when, then) triple. `decide` runs them in order and the
first guard whose `when` matches produces a Transition: an optional finished
word plus the new accumulator. Guards never touch the output list.
"""

from dataclasses import dataclass
from typing import Callable, Tuple
from ..core.types import CharClass, ScanContext, Transition
from ..grammar.schema import LaoGrammar

@dataclass(frozen=True)
class Guard:
    """One step of the decision chain."""
    name: str
    when: Callable[[ScanContext, LaoGrammar], bool]
    then: Callable[[ScanContext, LaoGrammar], Transition]

# ---------------------------
# Transition builders
# ---------------------------

def flush(ctx: ScanContext, seed: str = "") -> Transition:
    """Emit the whole accumulator (if any) and restart from `seed`."""
    return Transition(emitted=ctx.accumulator or None, accumulator=seed)

def append(ctx: ScanContext) -> Transition:
    return Transition(emitted=None, accumulator=ctx.accumulator + ctx.char)

def rebracket(ctx: ScanContext, keep: int) -> Transition:
    """
    Emit everything but the last `keep` accumulator chars; those chars open
    the new accumulator together with the current char.
    """
    head = ctx.accumulator[:-keep]
    tail = ctx.accumulator[-keep:]
    return Transition(emitted=head or None, accumulator=tail + ctx.char)

# ---------------------------
# Guard actions
# ---------------------------

def _non_lao(ctx: ScanContext, g: LaoGrammar) -> Transition:
    # Lao -> other script starts a token; runs of other scripts stay together
    if ctx.last_is_lao:
        return flush(ctx, seed=ctx.char)
    return append(ctx)

def _leading_vowel(ctx: ScanContext, g: LaoGrammar) -> Transition:
    # Doubled ເເ is one vowel, not a boundary
    if ctx.char == g.doubling_vowel and ctx.last == g.doubling_vowel:
        return append(ctx)
    return flush(ctx, seed=ctx.char)

def _is_glide_cluster(ctx: ScanContext, g: LaoGrammar) -> bool:
    return ctx.last == g.glide and ctx.second_last in g.glide_onsets

def _is_liquid_cluster(ctx: ScanContext, g: LaoGrammar) -> bool:
    return ctx.last == g.liquid and ctx.second_last in g.liquid_onsets

def _is_digraph(ctx: ScanContext, g: LaoGrammar) -> bool:
    return ctx.second_last == g.aspirate_marker and ctx.last in g.digraph_followers

# Two-character onsets that must stay together; checked before the
# single-consonant split, which would otherwise cut them in half.
CLUSTER_RULES: Tuple[Tuple[str, Callable[[ScanContext, LaoGrammar], bool]], ...] = (
    ("glide_cluster", _is_glide_cluster),
    ("liquid_cluster", _is_liquid_cluster),
    ("digraph", _is_digraph),
)

def _middle_mark(ctx: ScanContext, g: LaoGrammar) -> Transition:
    """
    Dependent vowels and tone marks attach to what came before.

    Decide which consonant(s) they attach to: a mark after a mark stays put,
    a cluster keeps both letters, otherwise the last consonant leaves the
    previous word and starts a new syllable with this mark.
    """
    if not ctx.accumulator:
        return Transition(emitted=None, accumulator=ctx.char)

    if (ctx.last_class is CharClass.MIDDLE_MARK or
            (ctx.char == g.floating_vowel and ctx.second_last in g.leading_vowels)):
        return append(ctx)

    if ctx.second_last:
        for _, matches in CLUSTER_RULES:
            if matches(ctx, g):
                return rebracket(ctx, keep=2)

    if ctx.last_class is CharClass.CONSONANT and ctx.second_last not in g.leading_vowels:
        return rebracket(ctx, keep=1)

    # Syllable still open under a leading vowel
    return append(ctx)

def _is_glide_split(ctx: ScanContext, g: LaoGrammar) -> bool:
    # TODO: have a Lao linguist confirm this lookahead before widening ambiguous_glides
    return (ctx.char in g.ambiguous_glides
            and bool(ctx.accumulator)
            and ctx.last_class is CharClass.CONSONANT
            and ctx.next_class is CharClass.CONSONANT)

GUARD_CHAIN: Tuple[Guard, ...] = (
    Guard("space",
          lambda ctx, g: ctx.char == " ",
          lambda ctx, g: flush(ctx)),
    Guard("non_lao",
          lambda ctx, g: ctx.char_class is CharClass.NON_LAO,
          _non_lao),
    Guard("repetition_mark",
          lambda ctx, g: ctx.char_class is CharClass.REPETITION_MARK,
          lambda ctx, g: flush(ctx, seed=ctx.char)),
    Guard("leading_vowel",
          lambda ctx, g: ctx.char_class is CharClass.LEADING_VOWEL,
          _leading_vowel),
    Guard("script_transition",
          lambda ctx, g: bool(ctx.accumulator) and not ctx.last_is_lao,
          lambda ctx, g: flush(ctx, seed=ctx.char)),
    Guard("middle_mark",
          lambda ctx, g: ctx.char_class is CharClass.MIDDLE_MARK,
          _middle_mark),
    Guard("ambiguous_glide",
          _is_glide_split,
          lambda ctx, g: rebracket(ctx, keep=1)),
    Guard("default",
          lambda ctx, g: True,
          lambda ctx, g: append(ctx)),
)

def decide(ctx: ScanContext, grammar: LaoGrammar) -> Tuple[Guard, Transition]:
    """
    Run the guard chain for one character.

    Args:
        ctx: Context of the character being scanned
        grammar: Active grammar

    Returns:
        tuple: (guard that fired, its transition)
    """
    for guard in GUARD_CHAIN[:-1]:
        if guard.when(ctx, grammar):
            return guard, guard.then(ctx, grammar)
    fallback = GUARD_CHAIN[-1]
    return fallback, fallback.then(ctx, grammar)
