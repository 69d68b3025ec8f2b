"""
Candidate filtering given observed feedback.

`matches(guess, candidate)` answers: could `candidate` be the hidden answer
that produced `guess.mask` when `guess.word` was played? It mirrors the
consumption bookkeeping of `compute()` directly on the candidate instead of
re-scoring it:

  1) CORRECT positions must agree and consume the candidate position.
  2) Walking the guess left to right, a MISPLACED letter must sit elsewhere in
     an unconsumed candidate position (which it then consumes), and a WRONG
     letter must have no unconsumed copy left.
  3) Closing check: the candidate's letter multiplicities agree with the
     marks (at least CORRECT+MISPLACED copies, exactly that many when the
     letter also drew a WRONG mark).

Step 2 must run in guess order: compute() hands out MISPLACED marks
left to right, so a WRONG followed by a MISPLACED of the same letter can never
be produced and must be rejected.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from .feedback import WORD_LENGTH, Correctness, Guess


def matches(guess: Guess, candidate: str) -> bool:
    word = guess.word
    mask = guess.mask
    used = [False] * WORD_LENGTH

    # Pass 1: CORRECT pins the letter; everything else forbids it in place.
    for i in range(WORD_LENGTH):
        if mask[i] is Correctness.CORRECT:
            if candidate[i] != word[i]:
                return False
            used[i] = True
        elif candidate[i] == word[i]:
            return False

    # Pass 2: relocate MISPLACED letters, and make sure WRONG letters are not
    # hiding in a position nobody has accounted for.
    for i in range(WORD_LENGTH):
        state = mask[i]
        if state is Correctness.CORRECT:
            continue
        g = word[i]
        free = -1
        for j in range(WORD_LENGTH):
            if not used[j] and candidate[j] == g:
                free = j
                break
        if state is Correctness.MISPLACED:
            if free < 0:
                return False
            used[free] = True
        elif free >= 0:
            return False

    # Closing check on multiplicities: marked copies must exist, and a WRONG
    # mark caps the letter at exactly the marked count.
    required: Counter = Counter()
    capped = set()
    for ch, state in zip(word, mask):
        if state is Correctness.WRONG:
            capped.add(ch)
        else:
            required[ch] += 1
    have = Counter(candidate)
    for ch, n in required.items():
        if have[ch] < n:
            return False
    for ch in capped:
        if have[ch] != required[ch]:
            return False

    return True


def filter_candidates(words: Iterable[str], history: Iterable[Guess]) -> List[str]:
    """
    Keep the words consistent with EVERY guess in `history`.
    Order is preserved as in `words`.
    """
    history = list(history)
    return [w for w in words if all(matches(g, w) for g in history)]
