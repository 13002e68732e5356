"""Services that implement the detect -> decide -> write/remove flow."""
