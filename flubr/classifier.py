"""
Build message classifier.

Maps message text to a pass/fail label using the configured patterns.
"""

from typing import Optional, Pattern

PASS = "pass"
FAIL = "fail"


def classify(text: Optional[str], pass_pattern: Pattern, fail_pattern: Pattern) -> Optional[str]:
    """
    Classify message text.

    The pass pattern is always tested first, so text matching both
    patterns is classified as a pass.

    Args:
        text: Message text (may be None)
        pass_pattern: Compiled pattern for passing builds
        fail_pattern: Compiled pattern for failing builds

    Returns:
        "pass", "fail", or None when neither pattern matches
    """
    if not text:
        return None
    if pass_pattern.search(text):
        return PASS
    if fail_pattern.search(text):
        return FAIL
    return None
