"""claw-git: quick status, smart commits and branch helpers on top of git."""
