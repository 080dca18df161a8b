"""resultboard - recent and upcoming daily result cards."""
