"""Terminal front-end for TaskDeck."""
