from radarlayout.processing.entry_processor import EntryProcessor

__all__ = ["EntryProcessor"]
