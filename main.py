# main.py
"""
Main entry point for the power-on card effects.

This script orchestrates the application lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Builds one animated card per configured effect.
4. Runs the frame loop until the window closes or max_steps is reached.
5. Handles clean shutdown.
"""
import cProfile
import io
import logging
import pstats
import sys

from utils import effect_options, load_config, setup_logging


def main(config_path: str = 'config.json'):
    """
    The main function to run the card effects.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    setup_logging(config)
    logging.info("--- Power-On Cards Starting ---")

    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    from visualization import Visualizer

    try:
        visualizer = Visualizer(effect_options(config), vis_params)
    except ValueError as e:
        logging.critical(f"Could not build cards: {e}")
        return

    log_throttle = run_params.get('log_throttle_steps', 300)
    max_steps = run_params.get('max_steps')
    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    running = True
    step_num = 0

    if profiler:
        profiler.enable()
    while running:
        # The visualizer ticks every card and returns False once the user quits.
        if not visualizer.draw():
            running = False
        step_num += 1

        # Hot loops must throttle logs
        if step_num % log_throttle == 0:
            logging.info(f"Frame {step_num}")
            for index, card in enumerate(visualizer.cards):
                logging.debug(
                    f"Card {index} | hovering: {card.effect.hovering} | "
                    f"wave front: {card.effect.wave_front:.3f} | "
                    f"intensity: {card.effect.intensity:.3f} | "
                    f"mean opacity: {card.effect.mean_opacity():.4f}"
                )

        if max_steps is not None and step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping.")
            running = False
    if profiler:
        profiler.disable()

    visualizer.close()
    logging.info("Frame loop finished.")

    if profiler:
        s = io.StringIO()
        # Sort by cumulative time spent in the function
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"--- Performance Profile ---\n{s.getvalue()}")

    logging.info("--- Power-On Cards Shutting Down ---")


if __name__ == "__main__":
    main(*sys.argv[1:2])
