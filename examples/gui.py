# examples/gui.py
from __future__ import annotations

import logging
import random
from itertools import combinations

import tkinter as tk
from tkinter import ttk, messagebox

from cgnd.errors import HullError, OrientationError
from cgnd.hull import convex_hull_nd
from cgnd.mesh import delaunay_mesh

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

logger = logging.getLogger(__name__)


def generate_random_points(n: int, dim: int):
    """
    Генерує n випадкових точок у [-1,1]^dim + вершини куба,
    щоб оболонка була нормальною (опуклий куб/квадрат).
    """
    pts = [tuple(float(c) for c in corner) for corner in _cube_corners(dim)]
    for _ in range(n):
        pts.append(tuple(random.uniform(-0.9, 0.9) for _ in range(dim)))
    return pts


def _cube_corners(dim: int):
    if dim == 0:
        return [()]
    return [c + (s,) for c in _cube_corners(dim - 1) for s in (-1, 1)]


def parse_points_from_text(text: str, dim: int):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: dim чисел через пробіл або кому.
    Повертає список кортежів float.
    """
    points = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != dim:
            raise ValueError(f"Рядок {lineno}: очікується {dim} числа, отримано: {len(parts)}")
        try:
            points.append(tuple(map(float, parts)))
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
    if len(points) < dim + 1:
        raise ValueError(f"Потрібно щонайменше {dim + 1} точок для тріангуляції у {dim}D.")
    return points


class TriangulationApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("cgnd: hull + Delaunay")
        self.geometry("800x700")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        self.dim = tk.IntVar(value=2)

        ttk.Radiobutton(
            mode_frame, text="Випадкові точки", variable=self.input_mode,
            value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок", variable=self.input_mode,
            value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Radiobutton(mode_frame, text="2D", variable=self.dim, value=2).grid(
            row=1, column=0, sticky="w", padx=5, pady=2
        )
        ttk.Radiobutton(mode_frame, text="3D", variable=self.dim, value=3).grid(
            row=1, column=1, sticky="w", padx=5, pady=2
        )

        # --- Параметри для random-режиму ---
        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкових точок)")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість випадкових внутрішніх точок:").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "20")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)

        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert(
            "1.0",
            "# Приклад (2D):\n"
            "# 0 0\n"
            "# 1 0\n"
            "# 1 1\n"
            "# 0 1\n"
        )

        run_btn = ttk.Button(main, text="Побудувати", command=self.run_pipeline)
        run_btn.pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.surface_var = tk.StringVar(value="—")
        self.simplices_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Граней оболонки:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.surface_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Симплексів Делоне:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.simplices_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        """Вмикаємо/вимикаємо поля залежно від режиму вводу."""
        if self.input_mode.get() == "random":
            self.n_entry.configure(state="normal")
        else:
            self.n_entry.configure(state="disabled")

    def update_plot(self, pts, surface, simplices, dim):
        """Ребра Делоне — тонкі, ребра оболонки — товсті."""
        self.fig.clear()
        self.ax = self.fig.add_subplot(111, projection="3d" if dim == 3 else None)

        def draw(simplex_list, linewidth, color):
            edges = {tuple(sorted(e)) for s in simplex_list for e in combinations(s, 2)}
            for a, b in edges:
                coords = list(zip(pts[a], pts[b]))
                self.ax.plot(*coords, linewidth=linewidth, color=color)

        draw(simplices, 0.5, "tab:blue")
        draw(surface, 1.5, "tab:red")

        if dim == 2:
            self.ax.set_aspect("equal")
        self.ax.set_title("Delaunay (edges) + hull")
        self.canvas.draw()

    def run_pipeline(self):
        dim = self.dim.get()

        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return
            points = generate_random_points(n, dim)
        else:
            raw_text = self.points_text.get("1.0", "end").strip()
            try:
                points = parse_points_from_text(raw_text, dim)
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            hull = convex_hull_nd(points, dim, with_planes=False).unwrap()
            mesh = delaunay_mesh(points, dim)
        except (HullError, OrientationError) as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        report = mesh.validate(points)
        self.update_plot(points, hull.faces, mesh.simplices, dim)

        self.surface_var.set(str(len(hull)))
        self.simplices_var.set(str(len(mesh)))
        if not mesh.ok:
            self.valid_var.set(mesh.message)
        elif report["bad_face_multiplicity"] or report["degenerate_simplices"]:
            self.valid_var.set("Є проблеми (див. лог)")
        else:
            self.valid_var.set("OK")
        logger.info("VALIDATION: %s", report)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = TriangulationApp()
    app.mainloop()
