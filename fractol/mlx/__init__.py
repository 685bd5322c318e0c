"""A small in-memory image and window layer: images, windows, event hooks, colour names and XPM loading."""