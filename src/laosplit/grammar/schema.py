"""Pydantic schema for the segmentation grammar (the static character sets)."""

from pydantic import BaseModel, Field
from typing import FrozenSet, List

LAO_BLOCK_START = 0x0E80
LAO_BLOCK_END = 0x0EFF

def is_lao_code_point(char: str) -> bool:
    """True for a single character inside the Lao Unicode block."""
    return len(char) == 1 and LAO_BLOCK_START <= ord(char) <= LAO_BLOCK_END

class LaoGrammar(BaseModel):
    """
    Character sets that drive the guard chain.

    Behaviour is changed by editing membership here, never by editing the
    guards. Instances are frozen and shared freely between threads.
    """
    consonants: FrozenSet[str] = Field(
        default=frozenset({
            'ກ', 'ຂ', 'ຄ', 'ງ', 'ຈ', 'ສ', 'ຊ', 'ຍ', 'ດ', 'ຕ', 'ຖ', 'ທ', 'ນ',
            'ບ', 'ປ', 'ຜ', 'ຝ', 'ພ', 'ຟ', 'ມ', 'ຢ', 'ຣ', 'ລ', 'ວ', 'ຫ', 'ອ', 'ຮ',
            'ໜ', 'ໝ',
        }),
        description="Base consonants, including the ligatures ໜ and ໝ")
    leading_vowels: FrozenSet[str] = Field(
        default=frozenset({'ເ', 'ແ', 'ໂ', 'ໄ', 'ໃ'}),
        description="Vowels written before their consonant; they open a syllable")
    middle_marks: FrozenSet[str] = Field(
        default=frozenset({
            'ະ', 'າ', 'ິ', 'ີ', 'ຶ', 'ື', 'ຸ', 'ູ',   # base vowels
            'ໍ', 'ຳ',                                # O / AM
            '່', '້', '໊', '໋',                      # tone marks
            'ຼ',                                     # subscript LO
            '໌',                                     # cancellation mark
            'ຽ', 'ັ', 'ົ',                            # IA, MAI KAN, MAI KON
        }),
        description="Dependent vowels and tone marks; they never start a syllable")
    digraph_followers: FrozenSet[str] = Field(
        default=frozenset({'ງ', 'ຍ', 'ລ', 'ວ', 'ຣ'}),
        description="Consonants that pair with the aspirate marker (ຫງ, ຫຍ, ຫລ, ຫວ, ຫຣ)")
    repetition_marks: FrozenSet[str] = Field(
        default=frozenset({'ໆ'}),
        description="Marks that always stand as their own token")

    doubling_vowel: str = Field(default='ເ',
                                description="Leading vowel that may be written twice without a break")
    floating_vowel: str = Field(default='ັ',
                                description="Vowel sign kept inside a syllable opened by a leading vowel")
    glide: str = Field(default='ວ', description="Glide that clusters with glide_onsets")
    glide_onsets: FrozenSet[str] = Field(default=frozenset({'ກ', 'ຂ', 'ຄ'}))
    liquid: str = Field(default='ຣ', description="Loanword liquid that clusters with liquid_onsets")
    liquid_onsets: FrozenSet[str] = Field(default=frozenset({'ທ', 'ປ', 'ກ', 'ບ', 'ຟ'}))
    aspirate_marker: str = Field(default='ຫ', description="First letter of the ຫ digraphs")
    ambiguous_glides: FrozenSet[str] = Field(
        default=frozenset({'ວ', 'ອ'}),
        description="Letters that act as glide or full consonant; split using one-char lookahead")

    class Config:
        extra = "forbid"  # Strict validation
        frozen = True

    def validate_sets(self) -> List[str]:
        """Check grammar consistency and return any issues."""
        issues = []

        named_sets = {
            "consonants": self.consonants,
            "leading_vowels": self.leading_vowels,
            "middle_marks": self.middle_marks,
            "digraph_followers": self.digraph_followers,
            "repetition_marks": self.repetition_marks,
            "glide_onsets": self.glide_onsets,
            "liquid_onsets": self.liquid_onsets,
            "ambiguous_glides": self.ambiguous_glides,
        }
        for name, members in named_sets.items():
            bad = sorted(m for m in members if not is_lao_code_point(m))
            if bad:
                issues.append(f"{name} has members that are not single Lao characters: {bad}")

        # The class sets must not overlap, otherwise classification is order-dependent
        class_sets = ["consonants", "leading_vowels", "middle_marks", "repetition_marks"]
        for i, left in enumerate(class_sets):
            for right in class_sets[i + 1:]:
                shared = named_sets[left] & named_sets[right]
                if shared:
                    issues.append(f"{left} and {right} overlap: {sorted(shared)}")

        for name in ["digraph_followers", "glide_onsets", "liquid_onsets", "ambiguous_glides"]:
            extra = named_sets[name] - self.consonants
            if extra:
                issues.append(f"{name} must be consonants, found {sorted(extra)}")

        expectations = [
            ("doubling_vowel", self.doubling_vowel, self.leading_vowels),
            ("floating_vowel", self.floating_vowel, self.middle_marks),
            ("glide", self.glide, self.consonants),
            ("liquid", self.liquid, self.consonants),
            ("aspirate_marker", self.aspirate_marker, self.consonants),
        ]
        for name, glyph, expected in expectations:
            if not is_lao_code_point(glyph):
                issues.append(f"{name} must be a single Lao character, got {glyph!r}")
            elif glyph not in expected:
                issues.append(f"{name} {glyph!r} is not in its expected set")

        return issues

DEFAULT_GRAMMAR = LaoGrammar()
