"""Shared test fixtures for codeatlas."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


# A small Express + React project: two features (auth, budget) with
# shared UI primitives, a shared lib/utils file and an API client singleton.
FULLSTACK_FILES = {
    "package.json": '{\n  "name": "budget-app",\n  "private": true\n}\n',
    "README.md": "# Budget app\n",
    "node_modules/react/index.js": "module.exports = {};\n",
    "server/server.js": (
        "const express = require('express');\n"
        "const mongoose = require('mongoose');\n"
        "const authRoutes = require('./routes/authRoutes');\n"
        "const budgetRoutes = require('./routes/budgetRoutes');\n"
        "\n"
        "const server = express();\n"
        "server.use('/api/auth', authRoutes);\n"
        "server.use('/api/budgets', budgetRoutes);\n"
        "mongoose.connect(process.env.MONGO_URI);\n"
        "server.listen(3000);\n"
    ),
    "server/routes/authRoutes.js": (
        "const express = require('express');\n"
        "const router = express.Router();\n"
        "const authController = require('../controllers/authController');\n"
        "\n"
        "router.post('/login', authController.login);\n"
        "router.post('/register', authController.register);\n"
        "\n"
        "module.exports = router;\n"
    ),
    "server/routes/budgetRoutes.js": (
        "const express = require('express');\n"
        "const router = express.Router();\n"
        "const budgetController = require('../controllers/budgetController');\n"
        "\n"
        "router.get('/', budgetController.list);\n"
        "router.post('/', budgetController.create);\n"
        "\n"
        "module.exports = router;\n"
    ),
    "server/controllers/authController.js": (
        "const User = require('../models/User');\n"
        "const jwt = require('jsonwebtoken');\n"
        "\n"
        "exports.login = async (req, res) => {\n"
        "  const user = await User.findOne({ email: req.body.email });\n"
        "  res.json({ token: jwt.sign({ id: user.id }, 'secret') });\n"
        "};\n"
        "\n"
        "exports.register = async (req, res) => {\n"
        "  const user = await User.create(req.body);\n"
        "  res.status(201).json(user);\n"
        "};\n"
    ),
    "server/controllers/budgetController.js": (
        "const Budget = require('../models/Budget');\n"
        "const { formatCurrency } = require('../utils/format');\n"
        "\n"
        "exports.list = async (req, res) => {\n"
        "  const budgets = await Budget.find();\n"
        "  res.json(budgets.map((b) => formatCurrency(b.amount)));\n"
        "};\n"
        "\n"
        "exports.create = async (req, res) => {\n"
        "  const budget = await Budget.create(req.body);\n"
        "  res.status(201).json(budget);\n"
        "};\n"
    ),
    "server/models/User.js": (
        "const mongoose = require('mongoose');\n"
        "\n"
        "const userSchema = new mongoose.Schema({\n"
        "  email: String,\n"
        "  password: String,\n"
        "});\n"
        "\n"
        "module.exports = mongoose.model('User', userSchema);\n"
    ),
    "server/models/Budget.js": (
        "const mongoose = require('mongoose');\n"
        "\n"
        "const budgetSchema = new mongoose.Schema({\n"
        "  name: String,\n"
        "  amount: Number,\n"
        "});\n"
        "\n"
        "module.exports = mongoose.model('Budget', budgetSchema);\n"
    ),
    "server/utils/format.js": (
        "function formatCurrency(amount) {\n"
        "  return '$' + amount.toFixed(2);\n"
        "}\n"
        "\n"
        "module.exports = { formatCurrency };\n"
    ),
    "client/src/main.jsx": (
        "import React from 'react';\n"
        "import ReactDOM from 'react-dom/client';\n"
        "import App from './App';\n"
        "\n"
        "ReactDOM.createRoot(document.getElementById('root')).render(<App />);\n"
    ),
    "client/src/App.jsx": (
        "import { BrowserRouter, Routes, Route } from 'react-router-dom';\n"
        "import Login from './pages/Login';\n"
        "import Register from './pages/Register';\n"
        "import Budgets from './pages/Budgets';\n"
        "import Budget from './pages/Budget';\n"
        "\n"
        "export default function App() {\n"
        "  return (\n"
        "    <BrowserRouter>\n"
        "      <Routes>\n"
        '        <Route path="/login" element={<Login />} />\n'
        '        <Route path="/register" element={<Register />} />\n'
        '        <Route path="/budgets" element={<Budgets />} />\n'
        '        <Route path="/budgets/:id" element={<Budget />} />\n'
        "      </Routes>\n"
        "    </BrowserRouter>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/pages/Login.jsx": (
        "import { useState } from 'react';\n"
        "import { login } from '../api/auth';\n"
        "import Button from '../components/ui/Button';\n"
        "\n"
        "export default function Login() {\n"
        "  const [email, setEmail] = useState('');\n"
        "  return (\n"
        "    <form onSubmit={() => login(email)}>\n"
        "      <Button>Sign in</Button>\n"
        "    </form>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/pages/Register.jsx": (
        "import { useState } from 'react';\n"
        "import { register } from '../api/auth';\n"
        "import Button from '../components/ui/Button';\n"
        "\n"
        "export default function Register() {\n"
        "  const [email, setEmail] = useState('');\n"
        "  return (\n"
        "    <form onSubmit={() => register(email)}>\n"
        "      <Button>Create account</Button>\n"
        "    </form>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/pages/Budgets.jsx": (
        "import { useEffect, useState } from 'react';\n"
        "import { getBudgets } from '../api/budgets';\n"
        "import BudgetList from '../components/budget/BudgetList';\n"
        "\n"
        "export default function Budgets() {\n"
        "  const [budgets, setBudgets] = useState([]);\n"
        "  useEffect(() => {\n"
        "    getBudgets().then((res) => setBudgets(res.data));\n"
        "  }, []);\n"
        "  return (\n"
        "    <BudgetList budgets={budgets} />\n"
        "  );\n"
        "}\n"
    ),
    "client/src/pages/Budget.jsx": (
        "import { useParams } from 'react-router-dom';\n"
        "import BudgetCard from '../components/budget/BudgetCard';\n"
        "\n"
        "export default function Budget() {\n"
        "  const { id } = useParams();\n"
        "  return (\n"
        "    <BudgetCard id={id} />\n"
        "  );\n"
        "}\n"
    ),
    "client/src/api/index.js": (
        "import axios from 'axios';\n"
        "\n"
        "const api = axios.create({ baseURL: '/api' });\n"
        "\n"
        "export default api;\n"
    ),
    "client/src/api/auth.js": (
        "import api from './index';\n"
        "\n"
        "export const login = (email) => api.post('/auth/login', { email });\n"
        "export const register = (email) => api.post('/auth/register', { email });\n"
    ),
    "client/src/api/budgets.ts": (
        "import axios from 'axios';\n"
        "\n"
        "export const getBudgets = () => axios.get('/api/budgets');\n"
        "export const createBudget = (data) => axios.post('/api/budgets', data);\n"
    ),
    "client/src/components/budget/BudgetList.jsx": (
        "import BudgetCard from './BudgetCard';\n"
        "\n"
        "export default function BudgetList({ budgets }) {\n"
        "  return (\n"
        "    <ul>{budgets.map((b) => <BudgetCard key={b.id} budget={b} />)}</ul>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/components/budget/BudgetCard.jsx": (
        "import { cn } from '../../lib/utils';\n"
        "\n"
        "export default function BudgetCard({ budget }) {\n"
        "  return (\n"
        "    <div className={cn('card')}>{budget.name}</div>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/components/budget/BudgetChart.jsx": (
        "export default function BudgetChart({ data }) {\n"
        "  return (\n"
        "    <svg>{data.length}</svg>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/components/ui/Button.jsx": (
        "export default function Button({ children }) {\n"
        "  return (\n"
        "    <button>{children}</button>\n"
        "  );\n"
        "}\n"
    ),
    "client/src/lib/utils.js": (
        "export function cn(...classes) {\n"
        "  return classes.filter(Boolean).join(' ');\n"
        "}\n"
    ),
}


def write_project(root: Path, files: dict[str, str]) -> Path:
    """Materialize a ``{relative_path: content}`` mapping under ``root``."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path):
    """Factory fixture: ``make_project({path: content})`` -> project root."""

    def _make(files: dict[str, str]) -> Path:
        return write_project(tmp_path / "project", files)

    return _make


@pytest.fixture
def fullstack_project(make_project):
    """The FULLSTACK_FILES project on disk."""
    return make_project(FULLSTACK_FILES)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project TOML files and CODEATLAS_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.startswith("CODEATLAS_")]:
        monkeypatch.delenv(key)
