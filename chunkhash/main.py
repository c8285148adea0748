"""Main entry point for chunkhash."""

import logging
from typing import Optional

import typer

from chunkhash.config import MAX_SEED, Config
from chunkhash.driver import ChunkedHasher
from chunkhash.errors import ChunkHashError
from chunkhash.file_session import FileSession
from chunkhash.keying import resolve_keying, resolve_path
from chunkhash.models import Algorithm, RunConfig, RunSummary
from chunkhash.reporter import Reporter
from chunkhash.utils.logger import setup_logger

app = typer.Typer(add_completion=False, help="Chunked xxHash checksums for large files.")


def run(run_config: RunConfig, reporter: Optional[Reporter] = None) -> RunSummary:
    """
    Resolve inputs and hash every chunk of the configured file.

    Raises:
        ChunkHashError: On the first path, open, seek, secret or read failure
    """
    reporter = reporter or Reporter(run_config.verbose)

    path = resolve_path(run_config.file_path)
    with FileSession(path) as session:
        reporter.file_info(str(path), session.length)

        keys = resolve_keying(run_config)
        reporter.keying(keys)

        summary = ChunkedHasher(run_config, keys, reporter).run(session)

    reporter.summary(summary)
    return summary


@app.command()
def main(
    filename: str = typer.Option(..., "--filename", "-f", help="File name to hash."),
    size: Optional[int] = typer.Option(
        None, "--size", "-s", min=1, help="Chunk size in bytes [default: 131072]."
    ),
    algorithm: Optional[Algorithm] = typer.Option(
        None, "--algorithm", "-a", case_sensitive=False, help="xxHash variant [default: xx128]."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-e", min=0, max=MAX_SEED, help="Seed, 0 means unset [default: 0]."
    ),
    secret: str = typer.Option(
        "", "--secret", "-r",
        help="Secret used by xx64 and xx128. Folded into an XXH3 seed, so digests "
             "differ from native XXH3 with-secret output.",
    ),
    generatesecret: bool = typer.Option(
        False, "--generatesecret", "-g", help="Derive the secret from the seed."
    ),
    print_: bool = typer.Option(False, "--print", "-p", help="Print progress and chunk digests."),
) -> None:
    """Hash FILENAME in fixed-size chunks and print one digest per chunk."""
    logger = setup_logger()

    try:
        config = Config()
        logger = setup_logger(config.log_level, config.log_file, config.log_max_files)
        logging.getLogger(__name__).debug(f"\n{config}")

        run_config = config.build_run_config(
            filename,
            size=size,
            algorithm=algorithm,
            seed=seed,
            secret=secret,
            generate_secret=generatesecret,
            verbose=print_,
        )
        run(run_config)

    except (ChunkHashError, ValueError) as e:
        logger.critical(str(e))
        raise typer.Exit(code=1)


if __name__ == '__main__':
    app()
