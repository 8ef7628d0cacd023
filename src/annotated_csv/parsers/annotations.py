import logging

logger = logging.getLogger(__name__)


class AnnotationResolver:
    """Deduplicating store of annotation texts.

    Keys are assigned in first-seen order starting at 0 and never change.
    One instance belongs to exactly one parse.
    """

    def __init__(self) -> None:
        self._keys: dict[str, int] = {}
        self._texts: list[str] = []

    def resolve(self, text: str) -> int:
        try:
            return self._keys[text]
        except KeyError:
            key = len(self._texts)
            self._keys[text] = key
            self._texts.append(text)
            logger.debug("Registered annotation %d: %r", key, text)
            return key

    def export_all(self) -> list[str]:
        # a copy, so callers cannot shift keys
        return list(self._texts)

    def __len__(self) -> int:
        return len(self._texts)
