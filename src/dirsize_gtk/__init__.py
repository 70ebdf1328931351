"""GTK 4 / libadwaita frontend for dirsize."""
