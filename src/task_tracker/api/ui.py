"""Inline HTML homepage: task form and list backed by /api/tasks."""

from __future__ import annotations

from html import escape


def render_homepage(*, app_name: str) -> str:
    title = escape(app_name)
    return f"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title} | My Tasks</title>
  <style>
    :root {{
      --bg: #f3efe6;
      --panel: #fffaf0;
      --ink: #112433;
      --muted: #5c6b74;
      --accent: #0f8b8d;
      --line: #d7d1c3;
      --warn: #b00020;
    }}
    * {{ box-sizing: border-box; }}
    body {{
      margin: 0;
      min-height: 100vh;
      font-family: system-ui, sans-serif;
      color: var(--ink);
      background: var(--bg);
    }}
    .wrap {{
      max-width: 720px;
      margin: 24px auto;
      padding: 0 16px 24px;
      display: grid;
      gap: 16px;
    }}
    .card {{
      background: var(--panel);
      border: 1px solid var(--line);
      border-radius: 16px;
      box-shadow: 0 8px 22px rgba(17, 36, 51, 0.08);
      padding: 18px;
    }}
    h1 {{ margin: 0 0 4px; }}
    .sub {{ margin: 0; color: var(--muted); }}
    label {{ display: block; font-weight: 600; margin: 10px 0 6px; }}
    input, textarea {{
      width: 100%;
      border: 1px solid var(--line);
      border-radius: 10px;
      padding: 10px;
      font: inherit;
    }}
    button {{
      border: 0;
      border-radius: 999px;
      padding: 8px 14px;
      font: inherit;
      cursor: pointer;
      background: var(--accent);
      color: white;
    }}
    button.ghost {{ background: transparent; color: var(--warn); border: 1px solid var(--line); }}
    button.ghost.edit {{ color: var(--accent); }}
    ul {{ list-style: none; padding: 0; margin: 0; }}
    li {{
      display: flex;
      gap: 10px;
      align-items: flex-start;
      padding: 10px 0;
      border-bottom: 1px solid var(--line);
    }}
    li .body {{ flex: 1; }}
    li.done .task-title {{ text-decoration: line-through; color: var(--muted); }}
    .task-description {{ margin: 4px 0 0; color: var(--muted); }}
    #statusText {{ min-height: 1.2em; color: var(--muted); }}
    #statusText.error {{ color: var(--warn); }}
  </style>
</head>
<body>
  <main class="wrap">
    <section class="card">
      <h1>My Tasks</h1>
      <p class="sub">{title}</p>
    </section>

    <section class="card">
      <form id="taskForm">
        <label for="titleInput">Title</label>
        <input id="titleInput" name="title" placeholder="Buy milk" required>
        <label for="descriptionInput">Description</label>
        <textarea id="descriptionInput" name="description" rows="3"></textarea>
        <p>
          <button id="submitBtn" type="submit">Add Task</button>
          <button id="cancelEditBtn" class="ghost" type="button" hidden>Cancel Edit</button>
        </p>
      </form>
      <p id="statusText"></p>
    </section>

    <section class="card">
      <ul id="taskList"></ul>
    </section>
  </main>

  <script>
    const form = document.getElementById("taskForm");
    const titleInput = document.getElementById("titleInput");
    const descriptionInput = document.getElementById("descriptionInput");
    const taskList = document.getElementById("taskList");
    const statusText = document.getElementById("statusText");
    const submitBtn = document.getElementById("submitBtn");
    const cancelEditBtn = document.getElementById("cancelEditBtn");
    // Id of the task loaded into the form; null while adding.
    let editingId = null;

    function setStatus(message, isError = false) {{
      statusText.textContent = message;
      statusText.classList.toggle("error", isError);
    }}

    async function request(url, method, body) {{
      const options = {{ method, headers: {{ "Content-Type": "application/json" }} }};
      if (body !== undefined) {{
        options.body = JSON.stringify(body);
      }}
      const response = await fetch(url, options);
      if (response.status === 204) {{
        return null;
      }}
      const data = await response.json();
      if (!response.ok) {{
        throw new Error(data.detail || "Request failed");
      }}
      return data;
    }}

    function startEdit(task) {{
      editingId = task.id;
      titleInput.value = task.title;
      descriptionInput.value = task.description;
      submitBtn.textContent = "Update Task";
      cancelEditBtn.hidden = false;
      titleInput.focus();
    }}

    function stopEdit() {{
      editingId = null;
      form.reset();
      submitBtn.textContent = "Add Task";
      cancelEditBtn.hidden = true;
    }}

    function renderTask(task) {{
      const item = document.createElement("li");
      item.classList.toggle("done", task.completed);

      const checkbox = document.createElement("input");
      checkbox.type = "checkbox";
      checkbox.checked = task.completed;
      checkbox.style.width = "auto";
      checkbox.addEventListener("change", () => toggleTask(task));

      const body = document.createElement("div");
      body.className = "body";
      const heading = document.createElement("strong");
      heading.className = "task-title";
      heading.textContent = task.title;
      body.appendChild(heading);
      if (task.description) {{
        const description = document.createElement("p");
        description.className = "task-description";
        description.textContent = task.description;
        body.appendChild(description);
      }}

      const edit = document.createElement("button");
      edit.className = "ghost edit";
      edit.textContent = "Edit";
      edit.addEventListener("click", () => startEdit(task));

      const remove = document.createElement("button");
      remove.className = "ghost";
      remove.textContent = "Delete";
      remove.addEventListener("click", () => deleteTask(task));

      item.append(checkbox, body, edit, remove);
      return item;
    }}

    async function loadTasks() {{
      try {{
        const tasks = await request("/api/tasks", "GET");
        taskList.replaceChildren(...tasks.map(renderTask));
        setStatus(tasks.length ? "" : "No tasks yet.");
      }} catch (err) {{
        setStatus(String(err.message || err), true);
      }}
    }}

    async function toggleTask(task) {{
      try {{
        await request("/api/tasks/" + encodeURIComponent(task.id), "PUT", {{
          completed: !task.completed,
        }});
        await loadTasks();
      }} catch (err) {{
        setStatus(String(err.message || err), true);
      }}
    }}

    async function deleteTask(task) {{
      try {{
        await request("/api/tasks/" + encodeURIComponent(task.id), "DELETE");
        if (editingId === task.id) {{
          stopEdit();
        }}
        await loadTasks();
      }} catch (err) {{
        setStatus(String(err.message || err), true);
      }}
    }}

    form.addEventListener("submit", async (event) => {{
      event.preventDefault();
      const payload = {{
        title: titleInput.value.trim(),
        description: descriptionInput.value.trim(),
      }};
      try {{
        if (editingId === null) {{
          await request("/api/tasks", "POST", payload);
        }} else {{
          await request("/api/tasks/" + encodeURIComponent(editingId), "PUT", payload);
        }}
        stopEdit();
        await loadTasks();
      }} catch (err) {{
        setStatus(String(err.message || err), true);
      }}
    }});

    cancelEditBtn.addEventListener("click", stopEdit);

    loadTasks();
  </script>
</body>
</html>
"""
