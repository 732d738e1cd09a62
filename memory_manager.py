"""
Memory register for DarkCalc (MC / MR / MS / M+ / M-)
"""


class MemoryRegister:
    def __init__(self):
        self.value = 0.0

    def store(self, value):
        """Replace memory (MS)"""
        self.value = float(value)

    def recall(self):
        """Recall memory value (MR)"""
        return self.value

    def add(self, value):
        """Add value to memory (M+)"""
        self.value += float(value)

    def subtract(self, value):
        """Subtract value from memory (M-)"""
        self.value -= float(value)

    def clear(self):
        """Clear memory (MC)"""
        self.value = 0.0

    def has_memory(self):
        return self.value != 0.0
