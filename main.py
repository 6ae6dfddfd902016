# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from animation_driver import AnimationDriver, PygameFrameScheduler
from circle_system import CircleSystem, random_color
from errors import ConfigurationError
from parameter_panel import ParameterPanel
from render_surface import PygameSurface

# Get the application's dedicated logger
logger = logging.getLogger("circle_sim")

import cProfile, pstats

def load_config(config_path='config.json'):
    """
    Reads the run configuration.

    Data Contract:
    - Inputs: config_path (str) - Path to the configuration file.
    - Outputs: dict - The parsed configuration.
    - Invariants: Assumes 'simulation' holds 'circle_count', 'circle_speed'
      and 'intersection_fill_color'. Their values are validated later by the
      driver, which raises ConfigurationError before any circles exist.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)
    config.setdefault('panel', {})
    config.setdefault('profiling', {'enabled': False, 'max_ticks': 0})
    return config

def handle_resize(driver, surface, width, height):
    """
    Applies a window resize between frames. A rejected size is logged and the
    current circle set keeps running.
    """
    display = pygame.display.get_surface()
    if display is not None:
        surface.target = display
    try:
        driver.resize(width, height)
    except ConfigurationError as e:
        logger.warning(f"Ignored window resize: {e}")

def run_frame_loop(driver, panel, scheduler, surface, clock, max_ticks=0):
    """
    The main frame loop. Runs until the window is closed, or for max_ticks
    frames when max_ticks > 0.
    """
    running = True
    ticks = 0

    while running and (max_ticks <= 0 or ticks < max_ticks):
        # Event handling
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                # Resize is handled between frames; the next tick sees a complete new set.
                handle_resize(driver, surface, event.w, event.h)
            else:
                panel.handle_event(event)

        # --- Physics, detection & drawing (one atomic tick) ---
        scheduler.run_pending()

        panel.draw(surface.target)
        pygame.display.flip()
        clock.tick(constants.FPS)
        ticks += 1

    driver.stop()

def main():
    """
    Main function to initialize and run the circle intersection animation.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    config = load_config()
    sim_config = config['simulation']
    panel_config = config['panel']
    profiling_config = config['profiling']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config.get('master_seed'))
    logger.info(f"Master RNG initialized with seed: {config.get('master_seed')}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    surface = PygameSurface(screen, random_color(rng, constants.BACKGROUND_ALPHA))
    scheduler = PygameFrameScheduler()
    circle_system = CircleSystem(rng)

    driver = AnimationDriver(
        surface=surface,
        scheduler=scheduler,
        circle_system=circle_system,
        circle_count=sim_config['circle_count'],
        circle_speed=sim_config['circle_speed'],
        intersection_fill_color=sim_config['intersection_fill_color']
    )
    panel = ParameterPanel(
        driver,
        count_step=panel_config.get('count_step', 1),
        speed_step=panel_config.get('speed_step', 0.1),
        marker_colors=panel_config.get('marker_colors')
    )

    # Surface -> bounds -> circles -> loop start
    width, height = screen.get_size()
    driver.resize(width, height)
    driver.start()

    max_ticks = profiling_config.get('max_ticks', 0)
    if profiling_config.get('enabled', False):
        profiler = cProfile.Profile()
        profiler.enable()

        run_frame_loop(driver, panel, scheduler, surface, clock, max_ticks)

        profiler.disable()
        logger.info("Profiling complete. Printing stats...")
        stats = pstats.Stats(profiler).sort_stats('cumtime')
        stats.print_stats(20) # Print the top 20 time-consuming functions
    else:
        run_frame_loop(driver, panel, scheduler, surface, clock, max_ticks)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
