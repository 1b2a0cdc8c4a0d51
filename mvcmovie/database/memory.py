"""In-memory implementation of the catalog gateway.

Keeps movies and reviews in dictionaries guarded by a single lock, so
every operation is atomic with respect to concurrent callers. Useful
for tests and for running the service without a database.
"""

import itertools
import threading

from mvcmovie.catalog.entities import Movie, Review
from mvcmovie.catalog.exceptions import EntityNotFoundError
from mvcmovie.catalog.validation import clean_movie_fields, clean_review_fields
from mvcmovie.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryMovieGateway:
    """MovieGateway storing entities in process memory.

    Attributes:
        _movies: Movie id to Movie mapping.
        _reviews: Review id to Review mapping.
        _movie_ids: Monotonic id source for movies.
        _review_ids: Monotonic id source for reviews.
        _lock: Serializes every read and write.
    """

    def __init__(self) -> None:
        self._movies: dict[int, Movie] = {}
        self._reviews: dict[int, Review] = {}
        self._movie_ids = itertools.count(1)
        self._review_ids = itertools.count(1)
        self._lock = threading.Lock()

    def _require_movie(self, movie_id: int) -> Movie:
        movie = self._movies.get(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    # =========================================================================
    # MOVIES
    # =========================================================================

    def list_movies(self) -> list[Movie]:
        with self._lock:
            return [self._movies[key] for key in sorted(self._movies)]

    def get_movie(self, movie_id: int) -> Movie:
        with self._lock:
            return self._require_movie(movie_id)

    def create_movie(self, title: str, genre: str) -> Movie:
        title, genre = clean_movie_fields(title, genre)
        with self._lock:
            movie = Movie(id=next(self._movie_ids), title=title, genre=genre)
            self._movies[movie.id] = movie
        logger.info("movie_created", movie_id=movie.id, title=movie.title)
        return movie

    def update_movie(self, movie_id: int, title: str, genre: str) -> Movie:
        with self._lock:
            self._require_movie(movie_id)
            title, genre = clean_movie_fields(title, genre)
            movie = Movie(id=movie_id, title=title, genre=genre)
            self._movies[movie_id] = movie
        logger.info("movie_updated", movie_id=movie_id, title=title, genre=genre)
        return movie

    def delete_movie(self, movie_id: int) -> Movie:
        with self._lock:
            movie = self._require_movie(movie_id)
            owned = [key for key, review in self._reviews.items() if review.movie_id == movie_id]
            for key in owned:
                del self._reviews[key]
            del self._movies[movie_id]
        logger.info("movie_deleted", movie_id=movie_id, reviews_removed=len(owned))
        return movie

    # =========================================================================
    # REVIEWS
    # =========================================================================

    def create_review(self, movie_id: int, content: str, rating: int) -> Review:
        with self._lock:
            self._require_movie(movie_id)
            content, rating = clean_review_fields(content, rating)
            review = Review(
                id=next(self._review_ids),
                movie_id=movie_id,
                content=content,
                rating=rating,
            )
            self._reviews[review.id] = review
        logger.info("review_created", review_id=review.id, movie_id=movie_id, rating=rating)
        return review

    def list_reviews_for_movie(self, movie_id: int) -> list[Review]:
        with self._lock:
            self._require_movie(movie_id)
            return [
                review
                for _, review in sorted(self._reviews.items())
                if review.movie_id == movie_id
            ]

    def get_review(self, review_id: int) -> Review:
        with self._lock:
            review = self._reviews.get(review_id)
            if review is None:
                raise EntityNotFoundError("Review", review_id)
            return review

    def delete_review(self, review_id: int) -> Review:
        with self._lock:
            review = self._reviews.pop(review_id, None)
            if review is None:
                raise EntityNotFoundError("Review", review_id)
        logger.info("review_deleted", review_id=review_id, movie_id=review.movie_id)
        return review
