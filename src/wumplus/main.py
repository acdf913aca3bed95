import argparse
import json
import logging
import random

from .agent.agent import WumplusAgent
from .environment.environment import WumplusEnvironment
from .utils.actions import Action
from .utils.display import WumplusDisplay
from .utils.constants import (
    MAP_SIZE,
    PERCEPT_DEAD,
    GAME_STATE_PLAYING,
    GAME_STATE_WON,
)

logger = logging.getLogger(__name__)


def load_testcase(testcase_file):
    """Load a fixed map from a JSON testcase file."""
    with open(testcase_file, 'r') as f:
        return json.load(f)


def read_command(display, input_fn=input):
    """Prompts until the player types a command that is an action. EOF quits."""
    while True:
        try:
            choice = input_fn("Enter a Command (?): ").strip()[:1]
        except EOFError:
            return Action.QUIT
        if choice == "?":
            display.print_help()
            continue
        action = Action.from_command(choice)
        if action is None:
            display.print_message("Do what now? (Unknown action)")
            continue
        return action


def _known_map(env, agent):
    if agent is not None:
        return agent.get_known_map()
    return [[set() for _ in range(env.N)] for _ in range(env.N)]


def run_simulation(env, agent=None, display=None, gui=None, delay=0.0, input_fn=input, quiet=False):
    """
    Plays one game to the end.

    Args:
        env (WumplusEnvironment): The world to play in.
        agent (WumplusAgent, optional): Plays the game; a human at the keyboard if None.
        display (WumplusDisplay, optional): Terminal output; created if None.
        gui (WumplusGUI, optional): Also draw every turn in a pygame window.
        delay (float): Seconds to wait between agent turns.
        input_fn (callable): Reads the human's commands.
        quiet (bool): Skip the per-turn terminal output (batch runs).

    Returns:
        dict: The final environment state.
    """
    display = display if display is not None else WumplusDisplay(env.N)
    message = ""

    if agent is not None:
        agent.update_state(env.get_current_state())
    percepts = env.get_percepts()

    while env.game_state == GAME_STATE_PLAYING:
        if not quiet:
            display.print_message("")
            if agent is not None:
                display.print_map(env.get_true_map(), env.agent_pos)
                display.print_knowledge(agent.get_known_map(), env.agent_pos, agent.destination.target)
            display.print_percepts(percepts)
            display.print_score(env.score, env.steps_taken)
        if gui is not None:
            gui.display_map(
                env.get_true_map(),
                _known_map(env, agent),
                env.agent_pos,
                agent.destination.target if agent is not None else None,
                env.score,
                env.steps_taken,
                env.agent_has_gold,
                percepts,
                message,
            )
            gui.pause(delay)
        elif agent is not None:
            display.pause(delay)

        if agent is not None:
            action = agent.decide_action(percepts)
            if not quiet:
                display.print_message(f"agent_input: {action.value}")
        else:
            action = read_command(display, input_fn)

        message = env.apply_action(action)
        if not quiet:
            display.print_message(message)

        if agent is not None:
            agent.update_state(env.get_current_state())
        percepts = env.get_percepts()

    final_state = env.get_current_state()
    logger.info(f"Game over: {final_state['game_state']} with score {final_state['score']}")

    if not quiet:
        display.print_final_analysis(
            env.get_true_map(),
            env.agent_pos,
            percepts,
            env.game_state,
            PERCEPT_DEAD in percepts,
            env.score,
            env.steps_taken,
        )
        if agent is not None:
            display.print_kb_dump(agent.dump_facts())

    if gui is not None:
        gui.display_map(
            env.get_true_map(),
            _known_map(env, agent),
            env.agent_pos,
            None,
            env.score,
            env.steps_taken,
            env.agent_has_gold,
            percepts,
            message,
        )
        gui.wait_for_key(score=env.score, game_state=env.game_state)
        gui.cleanup()

    return final_state


def run_trials(num_trials, N=MAP_SIZE, seed=None):
    """
    Lets the agent play `num_trials` random maps without any output and
    prints how it did.

    Returns:
        list[dict]: The final state of every game.
    """
    rng = random.Random(seed)
    results = []
    for i in range(num_trials):
        env = WumplusEnvironment(N, rng=random.Random(rng.getrandbits(32)))
        agent = WumplusAgent(N, rng=random.Random(rng.getrandbits(32)))
        final_state = run_simulation(env, agent, quiet=True)
        results.append(final_state)
        logger.info(f"Trial {i + 1}/{num_trials}: {final_state['game_state']}, score {final_state['score']}")

    wins = sum(1 for r in results if r["game_state"] == GAME_STATE_WON)
    avg_score = sum(r["score"] for r in results) / num_trials
    avg_steps = sum(r["steps_taken"] for r in results) / num_trials

    print("=" * 60)
    print(f"Number of trials: {num_trials}, world size: {N}x{N}")
    print("-" * 60)
    print(f"Success Rate:    {wins / num_trials * 100:.1f}%")
    print(f"Average Score:   {avg_score:.1f}")
    print(f"Average Steps:   {avg_steps:.1f}")
    print("=" * 60)
    return results


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="wumplus", description="Wum+, a wumpus clone with a self-solving agent")
    parser.add_argument("--agent", action="store_true", help="let the agent play instead of reading commands")
    parser.add_argument("--gui", action="store_true", help="draw the game in a pygame window")
    parser.add_argument("--delay", type=float, default=0.0, help="seconds between agent turns")
    parser.add_argument("--seed", type=int, default=None, help="seed for the map and the agent")
    parser.add_argument("--size", type=int, default=MAP_SIZE, help="map size N, outer wall included")
    parser.add_argument("--testcase", type=str, default=None, help="play a fixed map from a JSON file")
    parser.add_argument("--trials", type=int, default=0, help="play this many agent games headless and report")
    parser.add_argument("--verbose", "-v", action="store_true", help="log the agent's reasoning")
    args = parser.parse_args(argv)
    if args.size < 5:
        parser.error("--size must be at least 5")
    if args.trials < 0:
        parser.error("--trials must not be negative")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.trials:
        run_trials(args.trials, args.size, args.seed)
        return

    rng = random.Random(args.seed)
    if args.testcase:
        env = WumplusEnvironment.from_config(load_testcase(args.testcase))
    else:
        env = WumplusEnvironment(args.size, rng=rng)

    agent = WumplusAgent(env.N, rng=rng) if args.agent else None

    gui = None
    if args.gui:
        from .utils.gui import WumplusGUI  # pygame opens a window on init
        gui = WumplusGUI(env.N)

    display = WumplusDisplay(env.N)
    display.print_banner()
    run_simulation(env, agent, display, gui=gui, delay=args.delay)


if __name__ == "__main__":
    main()
