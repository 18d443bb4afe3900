import tyro

from flat_trajectories import FlatTrajectory, FlatTrajectoryConfig


def main(config: FlatTrajectoryConfig) -> list:
    """Generate a differentially flat trajectory.

    Args:
        config: Trajectory configuration.
    """
    traj = FlatTrajectory(config)

    print(
        f"Generating {config.name}: order {traj.order}, {traj.num_axes} axes, "
        f"{traj.time_steps} samples over {traj.transition}s"
    )

    return traj.generate(
        show_plot=config.show_plot,
        plot_path=config.plot_path,
        json_path=config.json_path,
    )


def entry_point() -> None:
    config = tyro.cli(FlatTrajectoryConfig)
    main(config)


if __name__ == "__main__":
    entry_point()
