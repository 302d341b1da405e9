# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import math
import random

from cg2d.triangulator import Triangulator, InsufficientPointsError

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def generate_random_outline(n: int, radius: float = 1.0):
    """
    Генерує опуклий-ish контур з n вершин навколо (0, 0):
    кути рівномірні, радіус трохи «тремтить».
    """
    pts = []
    for i in range(n):
        angle = 2.0 * math.pi * i / n
        r = radius * random.uniform(0.75, 1.0)
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def parse_points_from_text(text: str):
    """
    Парсить вершини контуру з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x, y) як float.
    """
    points = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
        points.append((x, y))
    return points


class VoronoiApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Shatter: Delaunay + Voronoi")
        self.geometry("800x700")

        self.tri: Triangulator | None = None

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Контур")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")

        ttk.Radiobutton(
            mode_frame,
            text="Випадковий контур",
            variable=self.input_mode,
            value="random",
            command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)

        ttk.Radiobutton(
            mode_frame,
            text="Ручне введення вершин",
            variable=self.input_mode,
            value="manual",
            command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(mode_frame, text="Кількість вершин:").grid(row=1, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(mode_frame, width=10)
        self.n_entry.insert(0, "12")
        self.n_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        self.points_text = tk.Text(mode_frame, height=5, wrap="none")
        self.points_text.grid(row=2, column=0, columnspan=2, sticky="we", padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n1 0\n1 1\n0 1\n")

        run_btn = ttk.Button(main, text="Побудувати", command=self.run_triangulation)
        run_btn.pack(fill="x", pady=5)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.points_var = tk.StringVar(value="—")
        self.tris_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Точок:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.points_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Трикутників:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.tris_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(
            main,
            text="Клік усередині контуру додає точку (динамічне оновлення).",
            foreground="gray",
            justify="center",
        ).pack(fill="x", pady=5)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)
        self.canvas.mpl_connect("button_press_event", self.on_click)

        self._update_mode_state()

    def _update_mode_state(self):
        if self.input_mode.get() == "random":
            self.n_entry.configure(state="normal")
            self.points_text.configure(state="disabled")
        else:
            self.n_entry.configure(state="disabled")
            self.points_text.configure(state="normal")

    def update_plot(self):
        self.ax.clear()
        tri = self.tri
        if tri is None:
            self.canvas.draw()
            return

        # клітини Вороного
        for cell in tri.get_voronoi_diagram():
            if len(cell) < 3:
                continue
            xs = [p.x for p in cell] + [cell[0].x]
            ys = [p.y for p in cell] + [cell[0].y]
            self.ax.fill(xs, ys, alpha=0.25)
            self.ax.plot(xs, ys, color="black", linewidth=0.6)

        # ребра Делоне
        for t in tri.get_delaunay_triangles():
            a, b, c = t.vertices()
            self.ax.plot([a.x, b.x, c.x, a.x], [a.y, b.y, c.y, a.y], color="tab:blue", linewidth=0.4)

        # контур
        outline = tri.outline
        self.ax.plot([p.x for p in outline] + [outline[0].x],
                     [p.y for p in outline] + [outline[0].y],
                     color="tab:red", linewidth=1.2)

        pts = tri.points
        self.ax.scatter([p.x for p in pts], [p.y for p in pts], s=6, color="black")
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_title("Delaunay + clipped Voronoi")
        self.canvas.draw()

    def _refresh_stats(self):
        report = self.tri.validate()
        self.points_var.set(str(report["points"]))
        self.tris_var.set(str(report["triangles"]))
        if report["bad_delaunay"] or report["super_leaks"] or report["cell_mismatch"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")
        print("VALIDATION:", report)

    def run_triangulation(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
            except ValueError:
                messagebox.showerror("Помилка", "Кількість вершин має бути цілим числом.")
                return
            outline = generate_random_outline(n)
        else:
            try:
                outline = parse_points_from_text(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            self.tri = Triangulator(outline)
        except InsufficientPointsError as e:
            messagebox.showerror("Замало точок", str(e))
            return

        self._refresh_stats()
        self.update_plot()

    def on_click(self, event):
        if self.tri is None or event.xdata is None or event.ydata is None:
            return
        if self.tri.dynamic_update_point((event.xdata, event.ydata)):
            self._refresh_stats()
            self.update_plot()


if __name__ == "__main__":
    app = VoronoiApp()
    app.mainloop()
