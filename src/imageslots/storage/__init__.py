"""Slot file storage for imageslots."""

from imageslots.storage.slots import SlotStore, SlotStoreError

__all__ = ["SlotStore", "SlotStoreError"]
