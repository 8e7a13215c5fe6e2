class Screen:
    """Any kind of screen that can show a message"""

    def __init__(self):
        self.text = ""

    def set_text(self, text: str):
        self.text = text

    def get_text(self) -> str:
        return self.text
