"""The falling-block puzzle game: board, pieces, score, controls, menu, music and rendering."""