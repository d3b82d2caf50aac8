import argparse
import logging
import sys

import pygame

from tetris_audio import Music, SoundBoard
from tetris_config import CONFIG, DIFFICULTY_SETTINGS
from tetris_game import Game
from tetris_highscore import open_store
from tetris_input import dispatch, enable_key_repeat
from tetris_layout import compute_dims
from tetris_render import RenderAssets

logger = logging.getLogger("retro_tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Retro falling-block puzzle""")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTY_SETTINGS), default=CONFIG["DIFFICULTY"])
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="Seed the piece randomizer for a reproducible sequence")
    parser.add_argument("--highscore-file", default=CONFIG["HIGH_SCORE_PATH"],
                        help="JSON file for the high score (':memory:' to not persist)")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    parser.add_argument("--mute", action="store_true", help="Start with sound effects off")
    parser.add_argument("--no-music", action="store_true", help="Start with background music off")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def apply_args(args):
    CONFIG["DIFFICULTY"] = args.difficulty
    CONFIG["SEED"] = args.seed
    CONFIG["HIGH_SCORE_PATH"] = args.highscore_file
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["SOUND_ENABLED"] = not args.mute
    CONFIG["MUSIC_ENABLED"] = not args.no_music


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    apply_args(args)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Retro Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    enable_key_repeat()

    game = Game(store=open_store(CONFIG["HIGH_SCORE_PATH"]))
    sound = SoundBoard(game.events)
    music = Music()
    logger.info("ready: difficulty=%s high score=%d", game.difficulty, game.high_score)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); return 0
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.quit(); return 0
                if e.key == pygame.K_m:
                    sound.toggle(); continue
                if e.key == pygame.K_n:
                    music.toggle(); continue
                dispatch(game, e.key)

        game.tick(dt)

        snap = game.snapshot()
        music.sync(snap)
        render.draw(screen, snap)
        pygame.display.flip()


if __name__ == "__main__":
    sys.exit(main())
