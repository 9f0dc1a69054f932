class Arguments:
    def __init__(self, show_legal_moves: bool, moves: list[str]) -> None:
        self.show_legal_moves = show_legal_moves

        # Fields played before handing control to the user, such as ["d3", "c3"].
        self.moves = moves
