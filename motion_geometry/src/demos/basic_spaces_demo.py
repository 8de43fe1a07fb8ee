"""
Basic demonstration of the ℝⁿ state space and its sampler.
"""
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '../../..'))

import logging

import numpy as np
import plotly.io as pio
from motion_geometry.src.config.space_config import build_sampler, build_space, load_space_config
from motion_geometry.src.spaces.real_vector_bounds import RealVectorBounds
from motion_geometry.src.spaces.real_vector_space import RealVectorStateSpace
from motion_geometry.src.visualization.sample_plots import plot_projected_states

ROOT_DIR = os.path.join(os.path.dirname(__file__), '../../..')


def demo_unit_square():
    """Bounds enforcement, extent and interpolation on [0,1]²."""
    print("=== Unit Square Demo ===")

    space = RealVectorStateSpace(2)
    space.set_bounds(RealVectorBounds.from_pairs([(0.0, 1.0), (0.0, 1.0)]))
    space.setup()
    space.print_settings()
    print(f"Maximum extent: {space.get_maximum_extent():.4f} (sqrt(2) = {np.sqrt(2):.4f})")

    state = space.alloc_state()
    state[0], state[1] = 1.5, -0.5
    print(f"\nState {state.values} satisfies bounds: {space.satisfies_bounds(state)}")
    space.enforce_bounds(state)
    print(f"After enforce_bounds: {state.values} satisfies bounds: {space.satisfies_bounds(state)}")

    start, goal, mid = space.alloc_state(), space.alloc_state(), space.alloc_state()
    goal.values[:] = [1.0, 1.0]
    space.interpolate(start, goal, 0.25, mid)
    print(f"\nInterpolating {start.values} -> {goal.values} at t=0.25: {mid.values}")
    print(f"Distance start-goal: {space.distance(start, goal):.4f}")

    for s in (state, start, goal, mid):
        space.free_state(s)
    return space


def demo_cart_pole(config_path: str):
    """Sample the cart-pole state space defined in the configuration file."""
    print("\n=== Cart-Pole Space Demo ===")

    config = load_space_config(config_path)
    space = build_space(config)
    sampler = build_sampler(space, config)
    space.print_settings()
    print(f"Index of 'theta': {space.get_dimension_index('theta')}")
    print(f"Index of 'phi': {space.get_dimension_index('phi')} (not a dimension)")

    samples = []
    for _ in range(200):
        state = space.alloc_state()
        sampler.sample_uniform(state)
        samples.append(state)
    print(f"\n{len(samples)} uniform samples, all within bounds: "
          f"{all(space.satisfies_bounds(s) for s in samples)}")

    center = space.alloc_state()
    near = space.alloc_state()
    sampler.sample_uniform_near(near, center, 0.5)
    print("Sample near the origin:")
    space.print_state(near)
    sampler.sample_gaussian(near, center, 1.0)
    print("Gaussian sample around the origin:")
    space.print_state(near)

    path = []
    for t in np.linspace(0.0, 1.0, 20):
        waypoint = space.alloc_state()
        space.interpolate(samples[0], samples[1], t, waypoint)
        path.append(waypoint)

    fig = plot_projected_states(space, samples, trajectory=path,
                                title="Cart-Pole Samples (default projection)")

    for s in samples + path + [center, near]:
        space.free_state(s)
    print(f"Live states after cleanup: {space.live_states}")
    return space, fig


def main():
    """Run all demos."""
    logging.basicConfig(level=logging.INFO)
    print("=" * 60)
    print("R^n State Space Demo")
    print("=" * 60)

    demo_unit_square()
    _, fig = demo_cart_pole(os.path.join(ROOT_DIR, "configs/default.yaml"))

    out_dir = os.path.join(ROOT_DIR, "visualizations")
    os.makedirs(out_dir, exist_ok=True)
    out_file = os.path.join(out_dir, "cart_pole_samples.html")
    pio.write_html(fig, out_file)

    print("\nVisualization saved to:")
    print("  visualizations/cart_pole_samples.html")
    print("=" * 60)


if __name__ == "__main__":
    main()
