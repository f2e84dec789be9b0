"""A falling-block game: board, pieces, colours, game state and the pygame front end."""