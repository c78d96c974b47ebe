import logging

from dashboard.datekeys import to_date_key

logger = logging.getLogger(__name__)


class JournalState:
    """One owner's journal, keyed by date-key.

    ``drafts`` holds unsaved text per date, so switching days never carries
    text typed for one day over to another.
    """

    def __init__(self, repository, owner_id):
        self.repository = repository
        self.owner_id = owner_id
        self.entries = {}
        self.drafts = {}
        self.loaded = False
        self.notices = []

    def load_entries(self, owner_id=None):
        owner_id = owner_id or self.owner_id
        result = self.repository.list_by_owner(owner_id)
        if not result.ok:
            self._notify(f"Could not load journal: {result.error}")
            return result
        self.owner_id = owner_id
        self.entries = {entry.date: entry.content for entry in result.value or []}
        self.loaded = True
        return result

    def displayed_content(self, day):
        key = to_date_key(day)
        if key in self.drafts:
            return self.drafts[key]
        return self.entries.get(key, "")

    def set_draft(self, day, text):
        key = to_date_key(day)
        if text == self.entries.get(key, ""):
            self.drafts.pop(key, None)
        else:
            self.drafts[key] = text

    def discard_draft(self, day):
        self.drafts.pop(to_date_key(day), None)

    def has_unsaved(self, day):
        return to_date_key(day) in self.drafts

    def save(self, content, day):
        if not content or not content.strip():
            return None
        key = to_date_key(day)
        had_entry = key in self.entries
        previous = self.entries.get(key)
        self.entries[key] = content

        lookup = self.repository.find_by_date(self.owner_id, key)
        if not lookup.ok:
            self._revert(key, had_entry, previous)
            self._notify(f"Could not save journal entry: {lookup.error}")
            return lookup

        existing = lookup.value
        if existing is not None:
            result = self.repository.update(self.owner_id, existing.id, content)
        else:
            result = self.repository.create(self.owner_id, key, content)
        if not result.ok:
            self._revert(key, had_entry, previous)
            self._notify(f"Could not save journal entry: {result.error}")
            return result

        self.entries[key] = result.value.content
        self.drafts.pop(key, None)
        return result

    def drain_notices(self):
        notices, self.notices = self.notices, []
        return notices

    def _revert(self, key, had_entry, previous):
        if had_entry:
            self.entries[key] = previous
        else:
            self.entries.pop(key, None)

    def _notify(self, message):
        logger.warning(message)
        self.notices.append(message)
