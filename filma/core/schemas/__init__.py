from .movie import MovieBase, MovieInput, Movie, MessageResponse, ErrorResponse

__all__ = ["MovieBase", "MovieInput", "Movie", "MessageResponse", "ErrorResponse"]
