"""Camera model that turns image coordinates into rays."""
