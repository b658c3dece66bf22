#!/usr/bin/env python3
"""
Lujvo Analysis Walkthrough

Shows how vlasisku splits lujvo (compound words) into rafsi using the
sample lexicon in data/.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vlasisku.decomposer import decompose
from vlasisku.lexicon import LexiconIndex


def analyze_lujvo(lexicon: LexiconIndex, word: str, explanation: str = ""):
    """Print the rafsi chain of one lujvo."""
    print(f"\nWord: '{word}'")
    if explanation:
        print(f"Meaning: {explanation}")

    parts = decompose(word, lexicon)
    if parts is None:
        print("  Not a valid lujvo for this lexicon")
        return

    print("  " + " + ".join(rafsi for rafsi, _ in parts))
    for rafsi, owner in parts:
        print(f"    {rafsi:<6} {owner.kind.value} {owner.word} ({owner.gloss})")


def main():
    """Run lujvo analysis examples."""
    lexicon = LexiconIndex.from_directory()

    print("\n")
    print("*" * 60)
    print("  VLASISKU: Lujvo Analysis")
    print("*" * 60)

    print("\n" + "=" * 60)
    print("Example 1: Rafsi + Final Gismu")
    print("=" * 60)
    analyze_lujvo(lexicon, "lojbangu", "Lojban language")

    print("\n" + "=" * 60)
    print("Example 2: Two Rafsi")
    print("=" * 60)
    analyze_lujvo(lexicon, "gerzda", "doghouse")
    analyze_lujvo(lexicon, "jbobau", "Lojban language (short form)")

    print("\n" + "=" * 60)
    print("Example 3: Elision Letter 'y'")
    print("=" * 60)
    analyze_lujvo(lexicon, "lojybau", "'y' is dropped before matching")

    print("\n" + "=" * 60)
    print("Example 4: Hyphen Letters 'r' and 'n'")
    print("=" * 60)
    analyze_lujvo(lexicon, "lojrkla", "'r' between rafsi is skipped")

    print("\n" + "=" * 60)
    print("Example 5: cmavo Rafsi")
    print("=" * 60)
    analyze_lujvo(lexicon, "nunpre", "event-person")

    print("\n" + "=" * 60)
    print("Example 6: Not a Lujvo")
    print("=" * 60)
    analyze_lujvo(lexicon, "gerkuzda", "a full gismu may only end a lujvo")
    print("\n")


if __name__ == "__main__":
    main()
