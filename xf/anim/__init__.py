"""Sprite-sheet animations, animation maps and the animator that plays them."""