from pathlib import Path

from config import Config
from viz import draw_graph
from io_utils import make_run_dir, save_config, save_summary, save_trace
from sim import Simulator
from animate import animate_trace


def main(cfg: Config | None = None, base: str = "outputs") -> Path:
    """
    Single-run entry point.

    Typical usage for a user:
      1. Open config.py and edit the Config defaults
         (graph kind, maze size, seed, algorithm names, goals, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/
         (graph.png, solution.png, trace.gif, trace.json, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Build configuration from config.py
    # ------------------------------------------------------------------
    if cfg is None:
        cfg = Config()

    # ------------------------------------------------------------------
    # 2) Create output directory and save config
    # ------------------------------------------------------------------
    run_dir = make_run_dir(cfg, base=base, path_algo_name=cfg.path_algo_name)

    # Save config.json so every run is reproducible.
    save_config(cfg, run_dir)

    # ------------------------------------------------------------------
    # 3) Build graph + simulator
    # ------------------------------------------------------------------
    # Simulator generates the graph from cfg (maze / circular / cloud),
    # resolves default endpoints and goals, and looks up the algorithms
    # by name in the registries.
    sim = Simulator(
        cfg=cfg,
        path_algo_name=cfg.path_algo_name,
        tour_algo_name=cfg.tour_algo_name,
        log_events=cfg.log_events,
    )

    # Reset timing statistics so total_runtime/call_count reflect this run.
    sim.path_algo.reset_stats()
    sim.tour_algo.reset_stats()

    # Draw the bare graph BEFORE any search.
    draw_graph(sim.graph, run_dir / "graph.png", start=sim.start, end=sim.end, title="Generated graph")

    # ------------------------------------------------------------------
    # 4) Run the algorithm(s)
    # ------------------------------------------------------------------
    result = sim.run()

    draw_graph(
        sim.graph,
        run_dir / "solution.png",
        path=result.path,
        start=sim.start,
        end=sim.end,
        title=f"{sim.path_algo.name}: {'found' if result.found else 'no path'}",
    )

    # ------------------------------------------------------------------
    # 5) Save metrics + traces
    # ------------------------------------------------------------------
    summary = sim.summary()
    save_summary(summary, run_dir)
    save_trace(result.steps, run_dir)

    if sim.tour_result is not None:
        save_trace(sim.tour_result.steps, run_dir, filename="tour_trace.json")
        draw_graph(
            sim.graph,
            run_dir / "tour.png",
            path=sim.tour_result.optimal_path,
            start=sim.start,
            title=f"Tour over {len(sim.goals)} goals",
        )

    # ------------------------------------------------------------------
    # 6) Build GIF animation of the trace
    # ------------------------------------------------------------------
    gif_path = run_dir / "trace.gif"
    animate_trace(sim.graph, result.steps, out_path=gif_path, fps=cfg.fps, title=sim.path_algo.name)

    print(f"Run directory: {run_dir}")
    print(
        f"Path found: {summary['result']['found']} "
        f"({summary['result']['path_hops']} hops, {summary['result']['trace_steps']} trace steps)"
    )
    return run_dir


if __name__ == "__main__":
    main()
