from matplotlib import pyplot as plt


def plot_3d(waypoints, result=None, show=True):
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')

    # 1. 绘制航线
    xs = [wp.x for wp in waypoints]
    ys = [wp.y for wp in waypoints]
    zs = [wp.z for wp in waypoints]
    ax.plot(xs, ys, zs, color='blue', linewidth=3, label='Flight Path', zorder=10)
    ax.scatter(xs, ys, zs, color='blue', s=40)

    # 2. 标注航段距离
    if result is not None:
        for i, d in enumerate(result["segment_distances_m"]):
            mx = (xs[i] + xs[i + 1]) / 2
            my = (ys[i] + ys[i + 1]) / 2
            mz = (zs[i] + zs[i + 1]) / 2
            ax.text(mx, my, mz, f"{d:.1f} m", color='gray')

    # 3. 绘制起终点
    if waypoints:
        ax.scatter([xs[0]], [ys[0]], [zs[0]], color='green', s=100, label='Start')
        ax.scatter([xs[-1]], [ys[-1]], [zs[-1]], color='red', s=100, label='Goal')

    ax.set_xlabel("X (m)")
    ax.set_ylabel("Y (m)")
    ax.set_zlabel("Altitude (m)")
    ax.view_init(elev=30, azim=-60)

    title = "Drone Path"
    if result is not None:
        title += f" | distance {result['total_distance_m']:.1f} m, energy {result['total_energy']:.1f} units"
    plt.legend()
    plt.title(title)
    if show:
        plt.show()
    return fig
