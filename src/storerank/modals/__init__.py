"""Modal screens for storerank."""

from storerank.modals.reset_modal import ResetDataModal

__all__ = ["ResetDataModal"]
