"""Host adapters embedding the editor in UI toolkits."""
