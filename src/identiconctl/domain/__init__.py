"""Pure identicon domain: colors, appearance, compositing, base64."""
