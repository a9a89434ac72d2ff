"""🏗️ Інфраструктурний шар: HTTP-джерело курсів та конвертер."""
