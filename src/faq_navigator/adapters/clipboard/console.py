"""Manual-copy fallback that prints the text."""

from faq_navigator.core import ManualCopy


class ConsoleCopy(ManualCopy):
    """Print text so the user can copy it by hand."""
    
    def copy(self, text: str) -> None:
        print(f"📋 Copy this link: {text}")
