"""🧰 Спільні утиліти бібліотеки (логування)."""
