"""Animated visualization for the RK4 Schrödinger simulation."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .potentials import evaluate_potential
from .wave import probability_density


def _style(fig, axes):
    fig.patch.set_facecolor("#0e0e0e")
    for ax in axes:
        ax.set_facecolor("#0e0e0e")
        ax.tick_params(colors="white")
        for spine in ax.spines.values():
            spine.set_color("#333")


def animate(stepper, n_frames=None, save_path=None):
    """
    Two-panel animation driven by `stepper.advance()` once per frame:
      top    — |ψ(x)|²  probability density
      bottom — Re(ψ) and Im(ψ)  wave function components

    Keys:  ↑/↓ change steps per frame,  r / i toggle Re ψ / Im ψ.
    """
    x = stepper.x
    psi0 = stepper.psi
    V = evaluate_potential(stepper.potential, x).real
    V = np.where(np.isfinite(V), V, 0.0)

    prob_max = probability_density(psi0).max() * 1.5
    wave_max = np.abs(psi0).max() * 1.5
    V_max = V.max() if V.max() > 0 else 1.0

    fig, (ax_p, ax_w) = plt.subplots(
        2, 1, figsize=(11, 6), sharex=True,
        gridspec_kw={"hspace": 0.08},
    )
    _style(fig, (ax_p, ax_w))
    fig.suptitle(
        f"Schrödinger 1D  —  RK4 ({stepper.method})",
        color="white", fontsize=13, y=0.96,
    )

    # ── Potential overlay ────────────────────────────────
    if V.any():
        V_prob = V / V_max * prob_max * 0.35
        V_wave = V / V_max * wave_max * 0.30
        ax_p.fill_between(x, 0, V_prob, color="#FF9800", alpha=0.25)
        ax_p.plot(x, V_prob, color="#FF9800", lw=0.8, alpha=0.5)
        ax_w.fill_between(x, -V_wave, V_wave, color="#FF9800", alpha=0.15)

    # ── Probability panel ────────────────────────────────
    (line_prob,) = ax_p.plot([], [], color="#29B6F6", lw=1.4, label=r"$|\psi|^2$")
    ax_p.set_ylim(0, prob_max)
    ax_p.set_xlim(x[0], x[-1])
    ax_p.set_ylabel(r"$|\psi(x)|^2$", color="white")
    ax_p.legend(loc="upper right", framealpha=0.3, facecolor="#222", labelcolor="white")

    # ── Wave function panel ──────────────────────────────
    (line_re,) = ax_w.plot([], [], color="#66BB6A", lw=0.9, alpha=0.85, label=r"Re $\psi$")
    (line_im,) = ax_w.plot([], [], color="#EF5350", lw=0.9, alpha=0.85, label=r"Im $\psi$")
    ax_w.set_ylim(-wave_max, wave_max)
    ax_w.set_ylabel(r"$\psi(x)$", color="white")
    ax_w.set_xlabel("x", color="white")
    ax_w.legend(loc="upper right", framealpha=0.3, facecolor="#222", labelcolor="white")

    info_text = ax_p.text(
        0.02, 0.80, "", transform=ax_p.transAxes,
        fontsize=10, color="white", family="monospace",
    )

    def _draw(psi):
        line_prob.set_data(x, probability_density(psi))
        line_re.set_data(x, psi.real)
        line_im.set_data(x, psi.imag)
        info_text.set_text(f"t = {stepper.time:.4f}\nspeed = {stepper.speed}")
        return line_prob, line_re, line_im, info_text

    def _init():
        return _draw(stepper.psi)

    def _update(_idx):
        return _draw(stepper.advance())

    def _on_key(event):
        if event.key == "up":
            stepper.speed_up()
        elif event.key == "down":
            stepper.slow_down()
        elif event.key == "r":
            line_re.set_visible(not line_re.get_visible())
        elif event.key == "i":
            line_im.set_visible(not line_im.get_visible())

    fig.canvas.mpl_connect("key_press_event", _on_key)

    anim = FuncAnimation(
        fig, _update, init_func=_init,
        frames=n_frames, interval=30, blit=True,
        cache_frame_data=False,
    )

    if save_path:
        anim.save(save_path, fps=30, dpi=150,
                  savefig_kwargs={"facecolor": fig.get_facecolor()})
        print(f"Salvo: {save_path}")
    else:
        plt.show()
    return anim


def show_2d(x, z, psi, save_path=None):
    """|ψ(x, z)|² of the initial 2D packet."""
    fig, ax = plt.subplots(figsize=(8, 8))
    _style(fig, (ax,))
    ax.imshow(
        probability_density(psi).T, origin="lower",
        extent=[x[0], x[-1], z[0], z[-1]], cmap="inferno",
    )
    ax.set_title("Pacote de onda 2D  —  |ψ(x, z)|²", color="white")
    ax.set_xlabel("x", color="white")
    ax.set_ylabel("z", color="white")

    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
        print(f"Salvo: {save_path}")
    else:
        plt.show()
    return fig
