"""Surface materials and the textures they sample."""
