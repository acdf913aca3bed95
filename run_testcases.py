#!/usr/bin/env python3
# Run the agent on the fixed maps under testcases/ and save a log of every game

import os
import sys
import json
import random
import logging
import argparse
import datetime

from wumplus.agent.agent import WumplusAgent
from wumplus.environment.environment import WumplusEnvironment
from wumplus.main import load_testcase
from wumplus.utils.constants import GAME_STATE_PLAYING

logger = logging.getLogger("run_testcases")

CATEGORIES = ['small_map', 'medium_map', 'large_map']


def run_testcase(testcase_path, seed=None):
    """Run a specific testcase and return the log of the game."""
    testcase = load_testcase(testcase_path)
    env = WumplusEnvironment.from_config(testcase)
    agent = WumplusAgent(env.N, rng=random.Random(seed))

    log = {
        "testcase_name": os.path.basename(testcase_path),
        "config": testcase,
        "seed": seed,
        "steps": [],
        "final_state": None,
    }

    agent.update_state(env.get_current_state())
    while env.game_state == GAME_STATE_PLAYING:
        percepts = env.get_percepts()
        step_log = {
            "step": env.steps_taken,
            "agent_pos": agent.agent_pos,
            "percepts": sorted(percepts),
            "score": env.score,
        }

        action = agent.decide_action(percepts)
        step_log["action"] = action.name
        step_log["destination"] = agent.destination.target
        step_log["action_result"] = env.apply_action(action)
        agent.update_state(env.get_current_state())

        log["steps"].append(step_log)

    log["final_state"] = {
        "game_state": env.game_state,
        "score": env.score,
        "steps_taken": env.steps_taken,
        "agent_pos": env.agent_pos,
        "agent_has_gold": env.agent_has_gold,
        "knowledge_base": [[kind.name, x, y] for kind, x, y in agent.dump_facts()],
        "true_map": ["".join(env.game_map[x][y] for x in range(env.N)) for y in range(env.N)],
    }
    return log


def save_log(log, output_dir):
    """Save the log to a file."""
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    testcase_name = log["testcase_name"].replace('.json', '')
    log_path = os.path.join(output_dir, f"{testcase_name}_{timestamp}.json")

    os.makedirs(output_dir, exist_ok=True)
    with open(log_path, 'w') as f:
        json.dump(log, f, indent=2)

    print(f"Log saved to {log_path}")
    return log_path


def report(log):
    final = log["final_state"]
    print(f"  {final['game_state']:<5s} score {final['score']:5d} in {final['steps_taken']:3d} steps")


def run_all_testcases(seed=None):
    """Run all testcases in the testcases directory."""
    testcases_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'testcases')

    for category in CATEGORIES:
        category_dir = os.path.join(testcases_dir, category)
        output_dir = os.path.join(category_dir, 'results')

        if not os.path.exists(category_dir):
            logger.info(f"Directory {category_dir} does not exist, skipping")
            continue

        for testcase in sorted(f for f in os.listdir(category_dir) if f.endswith('.json')):
            testcase_path = os.path.join(category_dir, testcase)
            print(f"Running testcase: {category}/{testcase}")
            try:
                log = run_testcase(testcase_path, seed)
            except (OSError, ValueError) as e:
                logger.error(f"Error running testcase {testcase}: {e}")
                continue
            report(log)
            save_log(log, output_dir)


def main():
    parser = argparse.ArgumentParser(description='Run Wum+ testcases')
    parser.add_argument('--all', action='store_true', help='Run all testcases')
    parser.add_argument('--testcase', type=str, help='Path to a specific testcase file')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the agent\'s exploration')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log the agent\'s reasoning')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.all:
        run_all_testcases(args.seed)
    elif args.testcase:
        if not os.path.exists(args.testcase):
            logger.error(f"Testcase file {args.testcase} does not exist")
            sys.exit(1)

        output_dir = os.path.join(os.path.dirname(args.testcase), 'results')
        log = run_testcase(args.testcase, args.seed)
        report(log)
        save_log(log, output_dir)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
